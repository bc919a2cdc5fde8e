#------------------------------
"""
Class :py:class:`AlignObjAngles` - alignment object with translation and Euler angles
=====================================================================================

Usage::

    from alipy.steer.AlignObjAngles import AlignObjAngles

    o = AlignObjAngles(volpath='ALIC_1/ITSV_1', voluid=2053, x=0.1, y=0, z=0, psi=0.5, theta=0, phi=0)
    tr = o.get_translation()   # np.array([0.1, 0., 0.])
    angles = o.get_angles()    # np.array([0.5, 0., 0.]) in degree
    m = o.get_matrix()         # 4x4 homogeneous matrix
    ok = o.set_matrix(m)       # False for degenerated rotation, object is not changed

See :py:class:`AlignObj`
"""
#------------------------------

import numpy as np

from alipy.steer.AlignObj import AlignObj, angles_to_matrix, matrix_to_angles, homogeneous_matrix

import logging
logger = logging.getLogger(__name__)

#------------------------------

class AlignObjAngles(AlignObj) :

    def __init__(self, volpath='', voluid=0, x=0, y=0, z=0, psi=0, theta=0, phi=0) :
        AlignObj.__init__(self, volpath, voluid)
        self._translation = np.zeros(3, dtype=np.float64)
        self._rotation = np.zeros(3, dtype=np.float64)
        self.set_pars(x, y, z, psi, theta, phi)

    def set_translation(self, x, y, z) :
        self._translation = np.array((x, y, z), dtype=np.float64)

    def set_rotation(self, psi, theta, phi) :
        self._rotation = np.array((psi, theta, phi), dtype=np.float64)

    def set_matrix(self, m) :
        m = np.asarray(m, dtype=np.float64)
        angles = matrix_to_angles(m[:3,:3])
        if angles is None :
            logger.warning('rotation matrix is degenerated, alignment object is not changed')
            return False
        self.set_translation(*m[:3, 3])
        self.set_rotation(*angles)
        return True

    def get_translation(self) :
        return self._translation.copy()

    def get_angles(self) :
        return self._rotation.copy()

    def get_matrix(self) :
        return homogeneous_matrix(angles_to_matrix(self._rotation), self._translation)

#------------------------------
