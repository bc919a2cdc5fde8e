"""
run this test by the command:
  pytest alipy/tests/test_AlignObj.py
"""
import copy
import logging
import numpy as np
import pytest

import alipy.steer.AlignConstants as ac
from alipy.steer.AlignObj import AlignObj, angles_to_matrix, matrix_to_angles, layer_to_voluid
from alipy.steer.AlignObjAngles import AlignObjAngles
from alipy.steer.AlignObjMatrix import AlignObjMatrix
from alipy.steer.TrackPoint import TrackPoint, TrackPointArray

UID = layer_to_voluid(ac.SPD1, 5)


def test_identity_matrix():
    assert np.allclose(angles_to_matrix((0, 0, 0)), np.eye(3).ravel())


def test_rotation_about_z():
    rot = angles_to_matrix((0, 0, 90)).reshape(3,3)
    assert np.allclose(rot, [[0,-1,0],[1,0,0],[0,0,1]])


def test_matrix_is_orthonormal():
    rot = angles_to_matrix((12.5, -33., 71.)).reshape(3,3)
    assert np.allclose(np.dot(rot, rot.T), np.eye(3))
    assert np.isclose(np.linalg.det(rot), 1.)


@pytest.mark.parametrize('angles', [(1., 2., 3.), (-10., 20., -30.), (45., -60., 80.), (0.001, 0., -0.002)])
def test_angles_matrix_round_trip(angles):
    back = matrix_to_angles(angles_to_matrix(angles))
    assert back is not None
    assert np.allclose(back, angles, atol=1e-9)


def test_matrix_to_angles_accepts_3x3():
    back = matrix_to_angles(angles_to_matrix((1., 2., 3.)).reshape(3,3))
    assert np.allclose(back, (1., 2., 3.))


@pytest.mark.parametrize('angles', [(0., 0., 90.), (90., 0., 0.), (0., 90., 0.), (0., 0., 120.)])
def test_matrix_to_angles_degenerated(angles):
    assert matrix_to_angles(angles_to_matrix(angles)) is None


def test_abstract_base():
    with pytest.raises(TypeError):
        AlignObj()


@pytest.mark.parametrize('cls', [AlignObjAngles, AlignObjMatrix])
def test_pars(cls):
    o = cls(volpath='ALIC_1/X', voluid=UID, x=0.1, y=-0.2, z=0.3, psi=1., theta=2., phi=3.)
    tr, angles = o.get_pars()
    assert np.allclose(tr, (0.1, -0.2, 0.3))
    assert np.allclose(angles, (1., 2., 3.))
    assert o.get_vol_path() == 'ALIC_1/X'
    assert o.get_voluid() == UID
    assert o.get_voluid_layer_module() == (ac.SPD1, 5)
    m = o.get_matrix()
    assert m.shape == (4,4)
    assert np.allclose(m[3], (0, 0, 0, 1))
    assert np.allclose(o.get_rotation_matrix(), angles_to_matrix((1., 2., 3.)))


def test_set_voluid():
    o = AlignObjAngles()
    o.set_voluid(ac.SSD2, 949)
    assert o.get_voluid_layer_module() == (ac.SSD2, 949)
    o.set_voluid_raw(2053)
    assert o.get_voluid() == 2053


def test_symbolic_path_from_table():
    o = AlignObjAngles(voluid=UID)
    assert o.get_symbolic_path() == 'ALIC_1/ITSV_1/ITSD_1/IT12_1/I12B_1/I10B_2/I107_2/I101_1/ITS1_1'
    o.set_vol_path('MY/PATH')
    assert o.get_symbolic_path() == 'MY/PATH'


def test_angles_set_matrix():
    src = AlignObjMatrix(x=1, y=2, z=3, psi=4, theta=5, phi=6)
    o = AlignObjAngles()
    assert o.set_matrix(src.get_matrix())
    assert np.allclose(o.get_translation(), (1, 2, 3))
    assert np.allclose(o.get_angles(), (4, 5, 6))


def test_angles_set_matrix_degenerated(caplog):
    o = AlignObjAngles(x=1, psi=2)
    m = AlignObjMatrix(x=5, phi=90).get_matrix()
    with caplog.at_level(logging.WARNING):
        assert not o.set_matrix(m)
    assert np.allclose(o.get_translation(), (1, 0, 0))
    assert np.allclose(o.get_angles(), (2, 0, 0))


def test_matrix_get_angles_degenerated(caplog):
    o = AlignObjMatrix(phi=90)
    with caplog.at_level(logging.WARNING):
        assert o.get_angles() is None
    assert 'can not be converted' in caplog.text


def test_matrix_set_matrix_shape():
    with pytest.raises(ValueError):
        AlignObjMatrix().set_matrix(np.eye(3))


def test_transform_point():
    o = AlignObjAngles(voluid=UID, x=1, y=2, z=3, phi=90)
    p = TrackPoint(1, 0, 0, cov=range(6), volume_id=UID)
    o.transform(p)
    assert np.allclose(p.get_xyz(), (1, 3, 3), atol=1e-6)
    assert np.allclose(p.get_cov(), range(6))


def test_transform_point_id_mismatch(caplog):
    o = AlignObjAngles(voluid=UID, x=1)
    p = TrackPoint(0, 0, 0, volume_id=UID+1)
    with caplog.at_level(logging.WARNING, logger='alipy.steer.AlignObj'):
        o.transform(p)
    assert 'Alignment object ID is not equal to the space-point ID (2053 != 2054)' in caplog.text
    assert np.allclose(p.get_xyz(), (1, 0, 0))


def test_transform_array():
    o = AlignObjMatrix(voluid=UID, x=0.5, y=-0.5, z=1.)
    arr = TrackPointArray(3)
    for i in range(3):
        arr.add_point(i, TrackPoint(i, 2*i, 3*i, volume_id=UID))
    o.transform_array(arr)
    x, y, z = arr.get_xyz_arrays()
    assert np.allclose(x, [0.5, 1.5, 2.5])
    assert np.allclose(y, [-0.5, 1.5, 3.5])
    assert np.allclose(z, [1., 4., 7.])
    assert list(arr.get_volume_ids()) == [UID]*3


def test_copy_is_independent():
    o = AlignObjMatrix(volpath='A/B', voluid=UID, x=1)
    c = copy.copy(o)
    c.set_translation(7, 8, 9)
    assert np.allclose(o.get_translation(), (1, 0, 0))
    assert c.get_vol_path() == 'A/B'
    assert c.get_voluid() == UID


def test_print_obj(capsys):
    o = AlignObjAngles(volpath='ALIC_1/ITSV_1', voluid=UID, x=0.5)
    o.print_obj()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == 'Volume=ALIC_1/ITSV_1 LayerID=1 ModuleID=5'
    assert len(lines) == 4
    assert lines[1] == '    1.000000    0.000000    0.000000    Tx =     0.500000    Psi   =     0.000000'
    assert 'Ty =' in lines[2] and 'Theta =' in lines[2]
    assert 'Tz =' in lines[3] and 'Phi   =' in lines[3]
    assert str(o) == '\n'.join(lines)


def test_track_point_array_index():
    arr = TrackPointArray(2)
    assert len(arr) == 2
    with pytest.raises(IndexError):
        arr.get_point(2)
    with pytest.raises(IndexError):
        arr.add_point(-1, TrackPoint())
    assert [p.get_volume_id() for p in arr] == [0, 0]


def test_track_point_volume_id_16_bits():
    p = TrackPoint(volume_id=0x1ffff)
    assert p.get_volume_id() == 0xffff
    p.set_volume_id(0x10805)
    assert p.get_volume_id() == 0x0805
    arr = TrackPointArray(1)
    arr.add_point(0, TrackPoint(volume_id=0x1ffff))
    assert arr.get_point(0).get_volume_id() == 0xffff
    assert arr.get_volume_ids()[0] == 0xffff
