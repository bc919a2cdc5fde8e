#------------------------------
"""
Class :py:class:`TestShuttle` - shuttle interface implementation for local tests of preprocessors
=================================================================================================

Usage::

    from alipy.shuttle.TestShuttle import TestShuttle
    from alipy.shuttle.CDBTypes import CDBPath

    TestShuttle.set_shuttle_log_dir('./logs')   # optional, per-detector log files

    shuttle = TestShuttle(run=7, start_time=1000, end_time=2000)
    shuttle.add_input_file(TestShuttle.DAQ, 'PMD', 'GAIN', 'LDC0', 'gain-ldc0.txt')
    shuttle.add_input_run_parameter('beamType', 'p-p')
    shuttle.set_dcs_input({'PMD_HV_01': [1500., 1501.]})

    prep = PMDPreprocessor(shuttle)  # registers itself in shuttle
    results = shuttle.process()      # {'PMD': 0}

    entry = shuttle.get_from_ocdb(CDBPath('PMD/Calib/Gain'))

Calibration objects are kept in memory: main storage for calibration objects
and input entries, reference storage for reference data.
Storage URIs and directories are process-wide settings of the class.

See :py:class:`ShuttleInterface`, :py:class:`Preprocessor`
"""
#------------------------------

import os

import alipy.shuttle.ShuttleConstants as sc
from alipy.shuttle.ShuttleInterface import ShuttleInterface
from alipy.shuttle.CDBTypes import CDBPath, CDBRunRange, CDBId, CDBEntry
from alipy.utils import get_logger, close_file_handlers, get_class_name

import logging
logger = logging.getLogger(__name__)

#------------------------------

def file_key(system, detector, id) :
    return '%d-%s-%s' % (system, detector, id)

#------------------------------

class TestShuttle(ShuttleInterface) :

    __test__ = False # not a pytest test class

    main_cdb          = sc.DEFAULT_MAIN_CDB
    local_cdb         = sc.DEFAULT_LOCAL_CDB
    main_ref_storage  = sc.DEFAULT_MAIN_REF_STORAGE
    local_ref_storage = sc.DEFAULT_LOCAL_REF_STORAGE
    shuttle_temp_dir  = sc.DEFAULT_TEMP_DIR
    shuttle_log_dir   = sc.DEFAULT_LOG_DIR

    def __init__(self, run, start_time, end_time) :
        self.run = int(run)
        self.start_time = int(start_time)
        self.end_time = int(end_time)

        self._input_files = {}     # file_key -> {source: filename}
        self._run_parameters = {}
        self._preprocessors = []
        self._dcs_alias_map = None

        self._main_storage = {}    # CDBPath -> list of CDBEntry
        self._ref_storage = {}

    #-------------------
    # input
    #-------------------

    def add_input_file(self, system, detector, id, source, filename) :
        """Registers file which is returned by get_file for system, detector, id and source.
        """
        sources = self._input_files.setdefault(file_key(system, detector, id), {})
        sources[source] = filename

    def set_dcs_input(self, dcs_alias_map) :
        self._dcs_alias_map = dcs_alias_map

    def add_input_run_parameter(self, key, value) :
        self._run_parameters[key] = value

    def add_input_cdb_entry(self, entry) :
        """Puts entry in the main storage to be available through get_from_ocdb.
        """
        if entry is None or not entry.is_valid() :
            logger.warning('input CDB entry is not valid: %s' % str(entry))
            return False
        self._main_storage.setdefault(entry.get_path(), []).append(entry)
        return True

    #-------------------
    # processing
    #-------------------

    def register_preprocessor(self, preprocessor) :
        if preprocessor in self._preprocessors :
            logger.warning('preprocessor %s is already registered' % preprocessor.get_name())
            return
        self._preprocessors.append(preprocessor)

    def get_preprocessors(self) :
        return list(self._preprocessors)

    def process(self) :
        """Runs all registered preprocessors, returns dict {detector: process() return value}.
        """
        results = {}
        for prep in self._preprocessors :
            name = prep.get_name()
            prep.initialize(self.run, self.start_time, self.end_time)
            dcs_map = self._dcs_alias_map if prep.process_dcs() else None
            result = prep.process(dcs_map)
            if result == sc.PROCESS_OK :
                logger.info('%s preprocessor %s for run %d succeeded' % (get_class_name(prep), name, self.run))
            else :
                logger.warning('%s preprocessor %s for run %d returned %s' % (get_class_name(prep), name, self.run, str(result)))
            results[name] = result
        return results

    #-------------------
    # storage
    #-------------------

    @staticmethod
    def _put(storage, path, obj, metadata, run_range) :
        entries = storage.setdefault(path, [])
        entry = CDBEntry(obj, CDBId(path, run_range, version=max((e.get_id().version for e in entries), default=-1) + 1), metadata)
        entries.append(entry)
        return entry

    def store(self, path, obj, metadata, validity_start=0, validity_infinite=False) :
        """Stores object with validity range [run - validity_start, run] or up to infinity.
        """
        path = path if isinstance(path, CDBPath) else CDBPath(path)
        first = self.run - validity_start
        if first < 0 :
            logger.warning('first run of validity range %d < 0 for %s, it is set to 0' % (first, path))
            first = 0
        last = CDBRunRange.INFINITY if validity_infinite else self.run
        entry = self._put(self._main_storage, path, obj, metadata, CDBRunRange(first, last))
        logger.info('stored in %s: %s' % (self.main_cdb, str(entry.get_id())))
        return True

    def store_reference_data(self, path, obj, metadata) :
        path = path if isinstance(path, CDBPath) else CDBPath(path)
        entry = self._put(self._ref_storage, path, obj, metadata, CDBRunRange(self.run, self.run))
        logger.info('stored in %s: %s' % (self.main_ref_storage, str(entry.get_id())))
        return True

    @staticmethod
    def _select(storage, path, run) :
        path = path if isinstance(path, CDBPath) else CDBPath(path)
        entries = [e for e in storage.get(path, []) if e.get_id().run_range.contains_run(run)]
        if not entries : return None
        return max(entries, key=lambda e: e.get_id().version)

    def get_from_ocdb(self, path) :
        entry = self._select(self._main_storage, path, self.run)
        if entry is None :
            logger.warning('no entry for %s valid for run %d' % (str(path), self.run))
        return entry

    def get_reference_data(self, path) :
        return self._select(self._ref_storage, path, self.run)

    def list_stored_paths(self) :
        return sorted(str(p) for p in self._main_storage)

    #-------------------
    # access to input
    #-------------------

    def get_file(self, system, detector, id, source) :
        sources = self._input_files.get(file_key(system, detector, id), {})
        fname = sources.get(source, None)
        if fname is None :
            logger.warning('file for system %s detector %s id %s source %s is not available'%\
                           (self.get_system_name(system), detector, id, source))
        return fname

    def get_file_sources(self, system, detector, id) :
        sources = self._input_files.get(file_key(system, detector, id), None)
        if sources is None :
            logger.warning('no sources for system %s detector %s id %s' % (self.get_system_name(system), detector, id))
            return None
        return list(sources.keys())

    def get_run_parameter(self, key) :
        value = self._run_parameters.get(key, None)
        if value is None :
            logger.warning('run parameter "%s" is not available' % key)
        return value

    def log(self, detector, message) :
        """Logs message for detector, also to <log-dir>/<detector>.log if log directory is set.
        """
        if self.shuttle_log_dir is None :
            logger.info('%s: %s' % (detector, message))
            return
        fname = os.path.join(self.shuttle_log_dir, '%s.log' % detector)
        dlogger = logging.getLogger('%s.%s' % (__name__, detector))
        for h in dlogger.handlers :
            if isinstance(h, logging.FileHandler) and h.baseFilename != os.path.abspath(fname) :
                close_file_handlers(dlogger)
                break
        dlogger = get_logger(name='%s.%s' % (__name__, detector), level=logging.INFO, logfile=fname, propagate=False)
        dlogger.info('%s: %s' % (detector, message))

    #-------------------
    # process-wide configuration
    #-------------------

    @classmethod
    def set_main_cdb(cls, uri) :
        cls.main_cdb = uri

    @classmethod
    def set_local_cdb(cls, uri) :
        cls.local_cdb = uri

    @classmethod
    def set_main_ref_storage(cls, uri) :
        cls.main_ref_storage = uri

    @classmethod
    def set_local_ref_storage(cls, uri) :
        cls.local_ref_storage = uri

    @classmethod
    def set_shuttle_temp_dir(cls, tmpdir) :
        os.makedirs(tmpdir, exist_ok=True)
        cls.shuttle_temp_dir = tmpdir

    @classmethod
    def set_shuttle_log_dir(cls, logdir) :
        """Sets directory for per-detector log files, None switches file logging off.
        """
        if logdir is not None :
            os.makedirs(logdir, exist_ok=True)
        cls.shuttle_log_dir = logdir

#------------------------------
