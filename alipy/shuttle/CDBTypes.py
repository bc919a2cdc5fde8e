#------------------------------
"""
Value types of the calibration data base (CDB) entries
======================================================

Usage::

    from alipy.shuttle.CDBTypes import CDBPath, CDBRunRange, CDBMetaData, CDBId, CDBEntry

    path = CDBPath('PMD/Calib/Gain')        # or CDBPath('PMD', 'Calib', 'Gain')
    rr   = CDBRunRange(100, CDBRunRange.INFINITY)
    md   = CDBMetaData(responsible='Expert', comment='gains from run 100')
    md.set_property('method', 'pulser')
    entry = CDBEntry(obj, CDBId(path, rr, version=1), md)

Entry keeps the calibration object with its identity (path, run validity
range and version) and meta-data.
"""
#------------------------------

import alipy.shuttle.ShuttleConstants as sc

#------------------------------

class CDBPath :
    """Three-level path Detector/Type/Name of a calibration object.
    """
    NLEVELS = 3

    def __init__(self, *levels) :
        if len(levels) == 1 :
            levels = tuple(str(levels[0]).strip('/').split('/'))
        if len(levels) != self.NLEVELS or not all(isinstance(v, str) and v and '/' not in v for v in levels) :
            raise ValueError('invalid CDB path %s, expected "Level0/Level1/Level2"' % str(levels))
        self._levels = tuple(levels)

    def get_path(self) :
        return '/'.join(self._levels)

    def get_level0(self) : return self._levels[0]
    def get_level1(self) : return self._levels[1]
    def get_level2(self) : return self._levels[2]

    def get_levels(self) :
        return self._levels

    def __eq__(self, other) :
        if not isinstance(other, CDBPath) : return NotImplemented
        return self._levels == other._levels

    def __ne__(self, other) :
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self) :
        return hash(self._levels)

    def __str__(self) :
        return self.get_path()

    def __repr__(self) :
        return 'CDBPath("%s")' % self.get_path()

#------------------------------

class CDBRunRange :
    """Inclusive range of run numbers [first, last].
    """
    INFINITY = sc.RUN_INFINITY

    def __init__(self, first=0, last=0) :
        first, last = int(first), int(last)
        if first < 0 or first > last :
            raise ValueError('invalid run range [%d, %d]' % (first, last))
        self._first = first
        self._last = last

    def get_first_run(self) : return self._first
    def get_last_run(self) : return self._last

    def is_valid(self) :
        return 0 <= self._first <= self._last

    def is_infinite(self) :
        return self._last == self.INFINITY

    def contains_run(self, run) :
        return self._first <= run <= self._last

    def overlaps(self, other) :
        return self._first <= other._last and other._first <= self._last

    def __eq__(self, other) :
        if not isinstance(other, CDBRunRange) : return NotImplemented
        return (self._first, self._last) == (other._first, other._last)

    def __ne__(self, other) :
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self) :
        return hash((self._first, self._last))

    def __str__(self) :
        return '[%d, %s]' % (self._first, 'inf' if self.is_infinite() else str(self._last))

    def __repr__(self) :
        return 'CDBRunRange(%d, %d)' % (self._first, self._last)

#------------------------------

class CDBMetaData :

    def __init__(self, responsible='', comment='', beam_period=0, aliroot_version='') :
        self.responsible = responsible
        self.comment = comment
        self.beam_period = beam_period
        self.aliroot_version = aliroot_version
        self._properties = {}

    def set_property(self, key, value) :
        self._properties[key] = value

    def get_property(self, key, default=None) :
        return self._properties.get(key, default)

    def remove_property(self, key) :
        return self._properties.pop(key, None) is not None

    def get_properties(self) :
        return dict(self._properties)

    def __str__(self) :
        s = 'responsible: %s comment: %s beam period: %s version: %s'%\
            (self.responsible, self.comment, str(self.beam_period), self.aliroot_version)
        for k, v in self._properties.items() :
            s += '\n  %s: %s' % (k, str(v))
        return s

#------------------------------

class CDBId :

    def __init__(self, path, run_range, version=-1) :
        self.path = path if isinstance(path, CDBPath) else CDBPath(path)
        self.run_range = run_range
        self.version = int(version)

    def is_valid(self) :
        return self.run_range is not None and self.run_range.is_valid()

    def is_specified(self) :
        return self.is_valid() and self.version >= 0

    def __str__(self) :
        return 'path: "%s" run range: %s version: v%d' % (self.path, str(self.run_range), self.version)

#------------------------------

class CDBEntry :

    def __init__(self, obj=None, cdb_id=None, metadata=None) :
        self.obj = obj
        self.cdb_id = cdb_id
        self.metadata = CDBMetaData() if metadata is None else metadata

    def get_object(self) : return self.obj
    def get_id(self) : return self.cdb_id
    def get_metadata(self) : return self.metadata

    def get_path(self) :
        return None if self.cdb_id is None else self.cdb_id.path

    def is_valid(self) :
        return self.obj is not None and self.cdb_id is not None and self.cdb_id.is_valid()

    def __str__(self) :
        return 'CDBEntry %s object: %s' % (str(self.cdb_id), type(self.obj).__name__)

#------------------------------
