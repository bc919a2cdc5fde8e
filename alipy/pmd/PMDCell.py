#------------------------------
"""
Class :py:class:`PMDCell` - cell/track info of the PMD calorimeter
===================================================================

Stores cell/track info which is used to assign the correct track
number to a multiple hit cell.

Usage::

    from alipy.pmd.PMDCell import PMDCell

    cell = PMDCell(track_number=12, sm_number=3, xpos=40, ypos=17, edep=0.0021)
    print(cell.get_track_number(), cell.get_sm_number(), cell.get_x(), cell.get_y(), cell.get_edep())
"""
#------------------------------

import numpy as np

#------------------------------

class PMDCell :
    """Immutable record of a single hit cell.
    """
    __slots__ = ('_track_number', '_sm_number', '_xpos', '_ypos', '_edep')

    def __init__(self, track_number=0, sm_number=0, xpos=0, ypos=0, edep=0.) :
        """Constructor.

        - track_number track number
        - sm_number    super-module number
        - xpos,ypos cell position (integer cell indexes)
        - edep      deposited energy
        """
        object.__setattr__(self, '_track_number', int(track_number))
        object.__setattr__(self, '_sm_number', int(sm_number))
        object.__setattr__(self, '_xpos',     int(xpos))
        object.__setattr__(self, '_ypos',     int(ypos))
        object.__setattr__(self, '_edep',     float(np.float32(edep)))

    def __setattr__(self, name, value) :
        raise AttributeError('PMDCell is immutable, can not set attribute "%s"' % name)

    def get_track_number(self) :
        return self._track_number

    def get_sm_number(self) :
        return self._sm_number

    def get_x(self) :
        return self._xpos

    def get_y(self) :
        return self._ypos

    def get_edep(self) :
        return self._edep

    def _key(self) :
        return (self._track_number, self._sm_number, self._xpos, self._ypos, self._edep)

    def __eq__(self, other) :
        if not isinstance(other, PMDCell) : return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other) :
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self) :
        return hash(self._key())

    def __copy__(self) :
        return self

    def __deepcopy__(self, memo) :
        return self

    def __repr__(self) :
        return 'PMDCell(track_number=%d, sm_number=%d, xpos=%d, ypos=%d, edep=%g)' % self._key()

    def __str__(self) :
        return 'track: %d SM: %d x: %d y: %d edep: %.6f' % self._key()

#------------------------------
