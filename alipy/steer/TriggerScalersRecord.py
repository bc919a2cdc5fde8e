#------------------------------
"""
Class :py:class:`TriggerScalersRecord` - trigger scalers of all classes at a given time stamp
=============================================================================================

Usage::

    from alipy.steer.TriggerScalersRecord import TriggerScalersRecord, TimeStamp

    rec = TriggerScalersRecord(TimeStamp(orbit=1200, period=3, bunch_cross=17))
    rec.add_trigger_scalers(5, 100, 90, 80, 70, 60, 50)
    rec.add_trigger_scalers(TriggerScalers(2, 10, 9, 8, 7, 6, 5))
    rec.sort()
    s = rec.get_trigger_scalers_for_class(5)
    rec.print_obj()
"""
#------------------------------

from alipy.steer.TriggerScalers import TriggerScalers

import logging
logger = logging.getLogger(__name__)

#------------------------------

class TimeStamp :
    """Time stamp in LHC units: period, orbit and bunch crossing, ordered in this sequence.
    """
    def __init__(self, orbit=0, period=0, bunch_cross=0) :
        self._orbit = int(orbit)
        self._period = int(period)
        self._bunch_cross = int(bunch_cross)

    def get_orbit(self) : return self._orbit
    def get_period(self) : return self._period
    def get_bunch_cross(self) : return self._bunch_cross

    def _key(self) :
        return (self._period, self._orbit, self._bunch_cross)

    def _is_valid_to_compare(self, other) :
        if not isinstance(other, TimeStamp) : raise TypeError('TimeStamp: comparing to unknown type')

    def __eq__(self, other) :
        self._is_valid_to_compare(other)
        return self._key() == other._key()

    def __ne__(self, other) :
        self._is_valid_to_compare(other)
        return self._key() != other._key()

    def __lt__(self, other) :
        self._is_valid_to_compare(other)
        return self._key() < other._key()

    def __le__(self, other) :
        self._is_valid_to_compare(other)
        return self._key() <= other._key()

    def __gt__(self, other) :
        self._is_valid_to_compare(other)
        return self._key() > other._key()

    def __ge__(self, other) :
        self._is_valid_to_compare(other)
        return self._key() >= other._key()

    def __hash__(self) :
        return hash(self._key())

    def __str__(self) :
        return 'Timestamp: Orbit: %d Period: %d Bunch Cross: %d' % (self._orbit, self._period, self._bunch_cross)

#------------------------------

class TriggerScalersRecord :

    def __init__(self, timestamp=None) :
        self._timestamp = TimeStamp() if timestamp is None else timestamp
        self._scalers = []

    def set_timestamp(self, timestamp) :
        self._timestamp = timestamp

    def get_timestamp(self) :
        return self._timestamp

    def add_trigger_scalers(self, scalers, *counters) :
        """Adds TriggerScalers object, or creates it from class index and six counters.
        """
        if not isinstance(scalers, TriggerScalers) :
            scalers = TriggerScalers(scalers, *counters)
        elif counters :
            raise TypeError('counters can not be specified together with TriggerScalers object')
        if self.get_trigger_scalers_for_class(scalers.get_class_index()) is not None :
            logger.warning('scalers for class %d are already in the record' % scalers.get_class_index())
        self._scalers.append(scalers)

    def get_scalers(self) :
        return list(self._scalers)

    def get_trigger_scalers_for_class(self, class_index) :
        """Returns the first TriggerScalers for class index or None.
        """
        for s in self._scalers :
            if s.get_class_index() == class_index : return s
        return None

    def sort(self) :
        """Sorts scalers by class index, preserves order of scalers with equal index.
        """
        self._scalers.sort()

    def compare(self, other) :
        """Compares records by time stamp.
        """
        if not isinstance(other, TriggerScalersRecord) :
            raise TypeError('TriggerScalersRecord.compare: comparing to unknown type %s' % type(other).__name__)
        if self._timestamp < other._timestamp : return -1
        if self._timestamp > other._timestamp : return 1
        return 0

    def __lt__(self, other) :
        return self.compare(other) < 0

    def __len__(self) :
        return len(self._scalers)

    def info_obj(self) :
        s = 'Trigger Scalers Record:\n%s' % str(self._timestamp)
        for sc in self._scalers :
            s += '\n%s' % sc.info_obj()
        return s

    def __str__(self) :
        return self.info_obj()

    def print_obj(self) :
        print(self.info_obj())

#------------------------------
