#------------------------------
"""
Class :py:class:`AlignObjMatrix` - alignment object with 4x4 homogeneous transformation matrix
==============================================================================================

Usage::

    from alipy.steer.AlignObjMatrix import AlignObjMatrix

    o = AlignObjMatrix(voluid=2053, x=0.1, psi=0.5)
    o.set_matrix(m)            # any 4x4 homogeneous matrix is accepted
    angles = o.get_angles()    # None if matrix can not be represented by angles

See :py:class:`AlignObj`
"""
#------------------------------

import numpy as np

from alipy.steer.AlignObj import AlignObj, angles_to_matrix, matrix_to_angles

import logging
logger = logging.getLogger(__name__)

#------------------------------

class AlignObjMatrix(AlignObj) :

    def __init__(self, volpath='', voluid=0, x=0, y=0, z=0, psi=0, theta=0, phi=0) :
        AlignObj.__init__(self, volpath, voluid)
        self._matrix = np.eye(4, dtype=np.float64)
        self.set_pars(x, y, z, psi, theta, phi)

    def set_translation(self, x, y, z) :
        self._matrix[:3, 3] = (x, y, z)

    def set_rotation(self, psi, theta, phi) :
        self._matrix[:3,:3] = angles_to_matrix((psi, theta, phi)).reshape(3,3)

    def set_matrix(self, m) :
        m = np.array(m, dtype=np.float64)
        if m.shape != (4,4) :
            raise ValueError('expected 4x4 homogeneous matrix, got shape %s' % str(m.shape))
        self._matrix = m
        return True

    def get_translation(self) :
        return self._matrix[:3, 3].copy()

    def get_angles(self) :
        angles = matrix_to_angles(self._matrix[:3,:3])
        if angles is None :
            logger.warning('rotation matrix of volume UID %d can not be converted to angles' % self._voluid)
        return angles

    def get_matrix(self) :
        return self._matrix.copy()

#------------------------------
