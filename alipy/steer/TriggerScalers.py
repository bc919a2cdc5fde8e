#------------------------------
"""
Class :py:class:`TriggerScalers` - trigger scalers of a single trigger class
============================================================================

For each trigger class there are six scalers:

    L0CB   L0 triggers before any vetos
    L0CA   L0 triggers after all vetos
    L1CB   L1 triggers before any vetos
    L1CA   L1 triggers after all vetos
    L2CB   L2 triggers before any vetos
    L2CA   L2 triggers after all vetos

Usage::

    from alipy.steer.TriggerScalers import TriggerScalers

    s = TriggerScalers(3, 100, 90, 80, 70, 60, 50)
    s.get_class_index()      # 3
    s.compare(other)         # -1, 0, 1 by class index
    sorted(list_of_scalers)  # sorted by class index
    s.print_obj()
"""
#------------------------------

import logging
logger = logging.getLogger(__name__)

#------------------------------

MAX_CLASS_INDEX = 0xff
MAX_COUNTER = 0xffffffff
COUNTER_NAMES = ('L0CB', 'L0CA', 'L1CB', 'L1CA', 'L2CB', 'L2CA')

#------------------------------

def _check_range(name, v, vmax) :
    v = int(v)
    if v < 0 or v > vmax : raise ValueError('%s value %d out of range [0, %d]' % (name, v, vmax))
    return v

#------------------------------

class TriggerScalers :

    def __init__(self, class_index=0, l0cb=0, l0ca=0, l1cb=0, l1ca=0, l2cb=0, l2ca=0) :
        self._class_index = _check_range('class index', class_index, MAX_CLASS_INDEX)
        self._counters = tuple(_check_range(name, v, MAX_COUNTER)\
                               for name, v in zip(COUNTER_NAMES, (l0cb, l0ca, l1cb, l1ca, l2cb, l2ca)))

    def get_class_index(self) : return self._class_index
    def get_l0cb(self) : return self._counters[0]
    def get_l0ca(self) : return self._counters[1]
    def get_l1cb(self) : return self._counters[2]
    def get_l1ca(self) : return self._counters[3]
    def get_l2cb(self) : return self._counters[4]
    def get_l2ca(self) : return self._counters[5]

    def get_counters(self) :
        """Returns tuple of six counters in order L0CB, L0CA, L1CB, L1CA, L2CB, L2CA.
        """
        return self._counters

    def compare(self, other) :
        """Compares scalers by class index to sort them in the scalers record by class index.
        """
        if not isinstance(other, TriggerScalers) :
            raise TypeError('TriggerScalers.compare: comparing to unknown type %s' % type(other).__name__)
        if self._class_index < other._class_index : return -1
        if self._class_index > other._class_index : return 1
        return 0

    def __lt__(self, other) :
        return self.compare(other) < 0

    def info_obj(self) :
        c = self._counters
        return 'Trigger Scalers for Class: %d\n  LOCB: %d LOCA: %d  L1CB: %d L1CA: %d  L2CB: %d L2CA: %d'%\
               ((self._class_index,) + c)

    def __str__(self) :
        return self.info_obj()

    def __repr__(self) :
        return 'TriggerScalers(%d, %d, %d, %d, %d, %d, %d)' % ((self._class_index,) + self._counters)

    def print_obj(self) :
        print(self.info_obj())

#------------------------------
