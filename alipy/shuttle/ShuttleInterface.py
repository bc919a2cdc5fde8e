#------------------------------
"""
Class :py:class:`ShuttleInterface` - interface of the calibration shuttle seen by preprocessors
===============================================================================================

Shuttle collects the input of a run from DAQ, DCS and HLT systems, runs
registered detector preprocessors and stores their calibration objects in the
calibration data base keyed by :py:class:`CDBPath` with run validity range.

See:
 * :py:class:`TestShuttle` - implementation for local tests of preprocessors
 * :py:class:`Preprocessor`
"""
#------------------------------

import abc

from alipy.shuttle.ShuttleConstants import DAQ, DCS, HLT, system_name

#------------------------------

class ShuttleInterface(metaclass=abc.ABCMeta) :

    DAQ = DAQ
    DCS = DCS
    HLT = HLT

    @staticmethod
    def get_system_name(system) :
        return system_name(system)

    @abc.abstractmethod
    def store(self, path, obj, metadata, validity_start=0, validity_infinite=False) :
        """Stores calibration object in the main calibration data base, returns bool status.
        """
        return

    @abc.abstractmethod
    def store_reference_data(self, path, obj, metadata) :
        """Stores reference object in the reference storage, returns bool status.
        """
        return

    @abc.abstractmethod
    def get_file(self, system, detector, id, source) :
        """Returns local file name for the input file or None.
        """
        return

    @abc.abstractmethod
    def get_file_sources(self, system, detector, id) :
        """Returns list of sources which provided files with id or None.
        """
        return

    @abc.abstractmethod
    def get_run_parameter(self, key) :
        return

    @abc.abstractmethod
    def get_from_ocdb(self, path) :
        """Returns CDBEntry valid for the current run or None.
        """
        return

    @abc.abstractmethod
    def log(self, detector, message) :
        return

    @abc.abstractmethod
    def register_preprocessor(self, preprocessor) :
        return

#------------------------------
