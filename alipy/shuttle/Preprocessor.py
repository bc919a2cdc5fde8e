#------------------------------
"""
Class :py:class:`Preprocessor` - base class of detector calibration preprocessors
=================================================================================

Usage::

    from alipy.shuttle.Preprocessor import Preprocessor

    class PMDPreprocessor(Preprocessor) :

        def __init__(self, shuttle) :
            Preprocessor.__init__(self, 'PMD', shuttle)

        def process(self, dcs_alias_map) :
            fname = self.get_file(self.DAQ, 'GAIN', 'LDC0')
            ...
            ok = self.store('Calib', 'Gain', gains, CDBMetaData(responsible='Expert'))
            return 0 if ok else 1

Subclass implements :py:meth:`process` which returns 0 on success.
All helper methods delegate to the shuttle with the detector name.
"""
#------------------------------

import abc

import alipy.shuttle.ShuttleConstants as sc
from alipy.shuttle.CDBTypes import CDBPath

import logging
logger = logging.getLogger(__name__)

#------------------------------

class Preprocessor(metaclass=abc.ABCMeta) :

    DAQ = sc.DAQ
    DCS = sc.DCS
    HLT = sc.HLT

    def __init__(self, detector, shuttle) :
        self._detector = detector
        self._shuttle = shuttle
        self.run = -1
        self.start_time = 0
        self.end_time = 0
        shuttle.register_preprocessor(self)

    def get_name(self) :
        return self._detector

    def initialize(self, run, start_time, end_time) :
        """Sets run parameters, is called by shuttle before process.
        """
        self.run = run
        self.start_time = start_time
        self.end_time = end_time
        logger.debug('%s: initialized for run %d time range [%d, %d]' % (self._detector, run, start_time, end_time))

    def process_dcs(self) :
        """Returns True if preprocessor needs DCS data for the current run.
        """
        return True

    @abc.abstractmethod
    def process(self, dcs_alias_map) :
        """Processes the run data, returns 0 on success.
        """
        return

    #-------------------
    # delegated to shuttle
    #-------------------

    def store(self, level1, level2, obj, metadata, validity_start=0, validity_infinite=False) :
        path = CDBPath(self._detector, level1, level2)
        return self._shuttle.store(path, obj, metadata, validity_start, validity_infinite)

    def store_reference_data(self, level1, level2, obj, metadata) :
        path = CDBPath(self._detector, level1, level2)
        return self._shuttle.store_reference_data(path, obj, metadata)

    def get_file(self, system, id, source) :
        return self._shuttle.get_file(system, self._detector, id, source)

    def get_file_sources(self, system, id) :
        return self._shuttle.get_file_sources(system, self._detector, id)

    def get_run_parameter(self, key) :
        return self._shuttle.get_run_parameter(key)

    def get_from_ocdb(self, level1, level2) :
        return self._shuttle.get_from_ocdb(CDBPath(self._detector, level1, level2))

    def log(self, message) :
        self._shuttle.log(self._detector, message)

#------------------------------
