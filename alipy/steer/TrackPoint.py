#------------------------------
"""
Classes :py:class:`TrackPoint` and :py:class:`TrackPointArray` - space points of a track
========================================================================================

Usage::

    from alipy.steer.TrackPoint import TrackPoint, TrackPointArray

    p = TrackPoint(1., 2., 3., volume_id=2053)
    x, y, z = p.get_xyz()
    p.set_xyz((1.1, 2.1, 3.1))

    arr = TrackPointArray(3)
    arr.add_point(0, p)
    p0 = arr.get_point(0)

Coordinates are kept in single precision. Covariance matrix is kept as
6 elements of the upper triangle: xx, xy, xz, yy, yz, zz.
"""
#------------------------------

import numpy as np

#------------------------------

class TrackPoint :

    def __init__(self, x=0, y=0, z=0, cov=None, volume_id=0) :
        self._xyz = np.array((x, y, z), dtype=np.float32)
        self._cov = np.zeros(6, dtype=np.float32) if cov is None else np.array(cov, dtype=np.float32).reshape(6)
        self._volume_id = int(volume_id) & 0xffff

    def get_xyz(self) :
        return self._xyz.copy()

    def set_xyz(self, xyz, cov=None) :
        self._xyz = np.array(xyz, dtype=np.float32).reshape(3)
        if cov is not None :
            self._cov = np.array(cov, dtype=np.float32).reshape(6)

    def get_x(self) : return float(self._xyz[0])
    def get_y(self) : return float(self._xyz[1])
    def get_z(self) : return float(self._xyz[2])

    def get_cov(self) :
        return self._cov.copy()

    def get_volume_id(self) :
        return self._volume_id

    def set_volume_id(self, volume_id) :
        self._volume_id = int(volume_id) & 0xffff

    def __repr__(self) :
        return 'TrackPoint(x=%g, y=%g, z=%g, volume_id=%d)' % (self.get_x(), self.get_y(), self.get_z(), self._volume_id)

#------------------------------

class TrackPointArray :
    """Fixed size array of track points.
    """
    def __init__(self, npoints=0) :
        self._npoints = int(npoints)
        self._xyz = np.zeros((self._npoints, 3), dtype=np.float32)
        self._cov = np.zeros((self._npoints, 6), dtype=np.float32)
        self._volume_id = np.zeros(self._npoints, dtype=np.uint16)

    def get_npoints(self) :
        return self._npoints

    def __len__(self) :
        return self._npoints

    def _check_index(self, i) :
        if not (0 <= i < self._npoints) :
            raise IndexError('point index %d is out of range [0, %d)' % (i, self._npoints))

    def get_point(self, i) :
        """Returns copy of the i-th point as a TrackPoint object.
        """
        self._check_index(i)
        x, y, z = self._xyz[i]
        return TrackPoint(x, y, z, cov=self._cov[i], volume_id=self._volume_id[i])

    def add_point(self, i, p) :
        """Sets the i-th point from TrackPoint object.
        """
        self._check_index(i)
        self._xyz[i] = p.get_xyz()
        self._cov[i] = p.get_cov()
        self._volume_id[i] = p.get_volume_id()

    def get_xyz_arrays(self) :
        """Returns copies of x, y, z arrays.
        """
        return self._xyz[:,0].copy(), self._xyz[:,1].copy(), self._xyz[:,2].copy()

    def get_volume_ids(self) :
        return self._volume_id.copy()

    def __iter__(self) :
        for i in range(self._npoints) :
            yield self.get_point(i)

#------------------------------
