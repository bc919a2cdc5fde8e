#------------------------------
"""
Class :py:class:`AlignObj` - abstract alignment object for a single detector volume
===================================================================================

Alignment object keeps the symbolic volume path, the volume unique identifier
(UID) and the misalignment of the volume as a translation and a rotation.
Two concrete representations are derived from it:

 * :py:class:`AlignObjAngles` - three doubles for the translation and three doubles
   for the rotation expressed with the Euler angles in the xyz-convention
   (roll, pitch, yaw). The angle signs are inverse with respect to the
   `MathWorld <http://mathworld.wolfram.com/EulerAngles.html>`_ reference,
   so that the representation is consistent with the TGeo rotation methods.
 * :py:class:`AlignObjMatrix` - 4x4 homogeneous transformation matrix.

Usage::

    import alipy.steer.AlignConstants as ac
    from alipy.steer.AlignObj import layer_to_voluid, voluid_to_layer, voluid_to_layer_and_module,\
                                     angles_to_matrix, matrix_to_angles
    from alipy.steer.AlignObjAngles import AlignObjAngles

    uid = layer_to_voluid(ac.SPD1, 5)              # 2053
    layer, module = voluid_to_layer_and_module(uid)  # (1, 5)

    rot = angles_to_matrix((1., 2., 3.))           # flat array of 9 elements
    angles = matrix_to_angles(rot)                 # array (1., 2., 3.) or None for degenerated matrix

    o = AlignObjAngles(voluid=uid, x=0.01, psi=0.1)
    o.transform(point)       # applies alignment to alipy.steer.TrackPoint.TrackPoint
    o.transform_array(arr)   # applies alignment to all points of TrackPointArray
    o.print_obj()
"""
#------------------------------

import abc
from math import radians, degrees, sin, cos, atan2, asin

import numpy as np

import alipy.steer.AlignConstants as ac
import alipy.steer.VolPaths as vp

import logging
logger = logging.getLogger(__name__)

#------------------------------

EPS_DEGENERATE = 1e-7

#------------------------------

def layer_to_voluid(layer, module) :
    """Packs layer and module number in the 16-bit volume UID.
       Out-of-range values are truncated to 5 and 11 bits, respectively.
    """
    layer, module = int(layer), int(module)
    if not (0 <= layer <= ac.MAX_LAYER) or not (0 <= module <= ac.MAX_MODULE) :
        logger.warning('layer %d or module %d is out of range [0,%d], [0,%d] - value truncated'%\
                       (layer, module, ac.MAX_LAYER, ac.MAX_MODULE))
    return ((layer & ac.LAYER_MASK) << ac.MODULE_BITS) | (module & ac.MODULE_MASK)


def voluid_to_layer(voluid) :
    """Returns layer from the volume UID.
    """
    return (int(voluid) >> ac.MODULE_BITS) & ac.LAYER_MASK


def voluid_to_module(voluid) :
    """Returns module number from the volume UID.
    """
    return int(voluid) & ac.MODULE_MASK


def voluid_to_layer_and_module(voluid) :
    """Returns tuple (layer, module) from the volume UID.
    """
    return voluid_to_layer(voluid), voluid_to_module(voluid)

#------------------------------

def angles_to_matrix(angles) :
    """Returns flat (9,) rotation matrix for Euler angles [degree] (psi, theta, phi) in "x y z" notation.
    """
    psi, the, phi = [radians(a) for a in angles]
    sinpsi, cospsi = sin(psi), cos(psi)
    sinthe, costhe = sin(the), cos(the)
    sinphi, cosphi = sin(phi), cos(phi)

    return np.array((
         costhe*cosphi,
        -costhe*sinphi,
         sinthe,
         sinpsi*sinthe*cosphi + cospsi*sinphi,
        -sinpsi*sinthe*sinphi + cospsi*cosphi,
        -costhe*sinpsi,
        -cospsi*sinthe*cosphi + sinpsi*sinphi,
         cospsi*sinthe*sinphi + sinpsi*cosphi,
         costhe*cospsi,
    ), dtype=np.float64)


def matrix_to_angles(rot) :
    """Returns array of Euler angles [degree] (psi, theta, phi) in "x y z" notation
       for rotation matrix (flat 9 elements or 3x3).
       Returns None if rot[0] or rot[8] is below EPS_DEGENERATE.
    """
    r = np.asarray(rot, dtype=np.float64).ravel()
    if r[0] < EPS_DEGENERATE or r[8] < EPS_DEGENERATE : return None
    return np.array((
        degrees(atan2(-r[5], r[8])),
        degrees(asin(max(-1., min(1., r[2])))),
        degrees(atan2(-r[1], r[0])),
    ), dtype=np.float64)


def homogeneous_matrix(rot, tr) :
    """Returns 4x4 homogeneous matrix for rotation (9 or 3x3) and translation (3).
    """
    m = np.eye(4, dtype=np.float64)
    m[:3,:3] = np.asarray(rot, dtype=np.float64).reshape(3,3)
    m[:3, 3] = np.asarray(tr, dtype=np.float64).reshape(3)
    return m

#------------------------------

class AlignObj(metaclass=abc.ABCMeta) :
    """Base class for alignment objects. Keeps volume path and UID,
       concrete classes keep translation and rotation.
    """
    def __init__(self, volpath='', voluid=0) :
        vp.init_vol_paths()
        self._volpath = volpath
        self._voluid = int(voluid)

    #-------------------
    # volume identity
    #-------------------

    def set_vol_path(self, volpath) :
        self._volpath = volpath

    def get_vol_path(self) :
        return self._volpath

    def get_symbolic_path(self) :
        """Returns volume path; for empty path returns path from the look-up table for the UID, or None.
        """
        if self._volpath : return self._volpath
        return vp.get_vol_path(*self.get_voluid_layer_module())

    def set_voluid(self, layer, module) :
        """From layer and module number builds the volume UID.
        """
        self._voluid = layer_to_voluid(layer, module)

    def set_voluid_raw(self, voluid) :
        self._voluid = int(voluid) & 0xffff

    def get_voluid(self) :
        return self._voluid

    def get_voluid_layer_module(self) :
        return voluid_to_layer_and_module(self._voluid)

    #-------------------
    # representation-specific
    #-------------------

    @abc.abstractmethod
    def set_translation(self, x, y, z) :
        return

    @abc.abstractmethod
    def set_rotation(self, psi, theta, phi) :
        return

    @abc.abstractmethod
    def set_matrix(self, m) :
        """Sets translation and rotation from 4x4 homogeneous matrix, returns bool status.
        """
        return

    @abc.abstractmethod
    def get_translation(self) :
        return

    @abc.abstractmethod
    def get_angles(self) :
        return

    @abc.abstractmethod
    def get_matrix(self) :
        """Returns 4x4 homogeneous matrix.
        """
        return

    #-------------------

    def set_pars(self, x, y, z, psi, theta, phi) :
        self.set_translation(x, y, z)
        self.set_rotation(psi, theta, phi)

    def get_pars(self) :
        """Returns translation and angles, angles are None for degenerated rotation.
        """
        return self.get_translation(), self.get_angles()

    def get_rotation_matrix(self) :
        """Returns flat (9,) rotation matrix.
        """
        return self.get_matrix()[:3,:3].ravel().copy()

    #-------------------
    # transformation of space points
    #-------------------

    def _check_volume_id(self, volume_id) :
        if self._voluid != volume_id :
            logger.warning('Alignment object ID is not equal to the space-point ID (%d != %d)' % (self._voluid, volume_id))

    def transform(self, p) :
        """Transforms coordinates of the TrackPoint p.
           The covariance matrix is not affected assuming that transformations are small.
        """
        self._check_volume_id(p.get_volume_id())
        m = self.get_matrix()
        xyz = m[:3, 3] + np.dot(m[:3,:3], p.get_xyz().astype(np.float64))
        p.set_xyz(xyz)

    def transform_array(self, arr) :
        """Transforms all points of the TrackPointArray arr.
        """
        for i in range(arr.get_npoints()) :
            p = arr.get_point(i)
            self.transform(p)
            arr.add_point(i, p)

    def __copy__(self) :
        o = self.__class__.__new__(self.__class__)
        o.__dict__.update((k, v.copy() if isinstance(v, np.ndarray) else v) for k, v in self.__dict__.items())
        return o

    #-------------------
    # printout
    #-------------------

    def info_obj(self) :
        """Returns (str) the content of the alignment object in angles and matrix representations.
        """
        # +0. turns negative zeros into zeros
        tr = self.get_translation() + 0.
        angles = self.get_angles()
        angles = np.zeros(3) if angles is None else angles + 0.
        rot = self.get_rotation_matrix() + 0.
        layer, module = self.get_voluid_layer_module()
        s = 'Volume=%s LayerID=%d ModuleID=%d' % (self._volpath, layer, module)
        for row, (tname, aname) in enumerate((('Tx', 'Psi  '), ('Ty', 'Theta'), ('Tz', 'Phi  '))) :
            s += '\n%12.6f%12.6f%12.6f    %s = %12.6f    %s = %12.6f'%\
                 (rot[3*row], rot[3*row+1], rot[3*row+2], tname, tr[row], aname, angles[row])
        return s

    def __str__(self) :
        return self.info_obj()

    def print_obj(self) :
        print(self.info_obj())

#------------------------------

if __name__ == "__main__" :
    import sys
    sys.exit('Module is not supposed to be run as main module')

# EOF
