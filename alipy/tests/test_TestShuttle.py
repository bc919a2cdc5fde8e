"""
run this test by the command:
  pytest alipy/tests/test_TestShuttle.py
"""
import logging
import os
import pytest

from alipy.shuttle.TestShuttle import TestShuttle
from alipy.shuttle.Preprocessor import Preprocessor
from alipy.shuttle.CDBTypes import CDBPath, CDBRunRange, CDBMetaData, CDBId, CDBEntry


class GainPreprocessor(Preprocessor):
    """Reads gains from DAQ file sources and stores them, DCS HV values as reference."""

    def __init__(self, shuttle):
        Preprocessor.__init__(self, 'PMD', shuttle)
        self.dcs_seen = 'not called'

    def process(self, dcs_alias_map):
        self.dcs_seen = dcs_alias_map
        sources = self.get_file_sources(self.DAQ, 'GAIN')
        if not sources:
            self.log('no gain files')
            return 1
        gains = dict((src, self.get_file(self.DAQ, 'GAIN', src)) for src in sources)
        md = CDBMetaData(responsible='Expert', comment='test gains')
        ok = self.store('Calib', 'Gain', gains, md, validity_start=2)
        ok &= self.store_reference_data('DCS', 'HV', dcs_alias_map, md)
        self.log('stored gains for %d sources' % len(gains))
        return 0 if ok else 2


class NoDCSPreprocessor(GainPreprocessor):

    def __init__(self, shuttle):
        Preprocessor.__init__(self, 'T00', shuttle)
        self.dcs_seen = 'not called'

    def process_dcs(self):
        return False


@pytest.fixture
def shuttle():
    s = TestShuttle(run=7, start_time=1000, end_time=2000)
    s.add_input_file(TestShuttle.DAQ, 'PMD', 'GAIN', 'LDC0', 'gain-ldc0.txt')
    s.add_input_file(TestShuttle.DAQ, 'PMD', 'GAIN', 'LDC1', 'gain-ldc1.txt')
    s.add_input_run_parameter('beamType', 'p-p')
    s.set_dcs_input({'PMD_HV_01': [1500., 1501.]})
    return s


def test_inputs(shuttle):
    assert shuttle.get_file(TestShuttle.DAQ, 'PMD', 'GAIN', 'LDC1') == 'gain-ldc1.txt'
    assert shuttle.get_file(TestShuttle.DCS, 'PMD', 'GAIN', 'LDC1') is None
    assert sorted(shuttle.get_file_sources(TestShuttle.DAQ, 'PMD', 'GAIN')) == ['LDC0', 'LDC1']
    assert shuttle.get_file_sources(TestShuttle.HLT, 'PMD', 'GAIN') is None
    assert shuttle.get_run_parameter('beamType') == 'p-p'
    assert shuttle.get_run_parameter('energy') is None


def test_process(shuttle):
    prep = GainPreprocessor(shuttle)
    results = shuttle.process()
    assert results == {'PMD': 0}
    assert (prep.run, prep.start_time, prep.end_time) == (7, 1000, 2000)
    assert prep.dcs_seen == {'PMD_HV_01': [1500., 1501.]}

    entry = shuttle.get_from_ocdb(CDBPath('PMD/Calib/Gain'))
    assert entry.get_object() == {'LDC0': 'gain-ldc0.txt', 'LDC1': 'gain-ldc1.txt'}
    assert entry.get_id().run_range == CDBRunRange(5, 7)
    assert entry.get_id().version == 0
    assert entry.get_metadata().responsible == 'Expert'

    ref = shuttle.get_reference_data('PMD/DCS/HV')
    assert ref.get_id().run_range == CDBRunRange(7, 7)
    assert shuttle.list_stored_paths() == ['PMD/Calib/Gain']


def test_process_without_dcs(shuttle):
    prep = NoDCSPreprocessor(shuttle)
    assert shuttle.process() == {'T00': 1}
    assert prep.dcs_seen is None


def test_register_once(shuttle):
    prep = GainPreprocessor(shuttle)
    shuttle.register_preprocessor(prep)
    assert shuttle.get_preprocessors() == [prep]


def test_store_validity_and_versions(shuttle, caplog):
    path = CDBPath('TRD', 'Calib', 'Gain')
    assert shuttle.store(path, [1, 2], CDBMetaData())
    assert shuttle.store('TRD/Calib/Gain', [3, 4], CDBMetaData(), validity_infinite=True)
    entry = shuttle.get_from_ocdb(path)
    assert entry.get_object() == [3, 4]
    assert entry.get_id().version == 1
    assert entry.get_id().run_range.is_infinite()

    with caplog.at_level(logging.WARNING):
        assert shuttle.store(path, [5], CDBMetaData(), validity_start=100)
    assert 'is set to 0' in caplog.text
    assert shuttle.get_from_ocdb(path).get_id().run_range == CDBRunRange(0, 7)


def test_get_from_ocdb_input_entry(shuttle):
    path = CDBPath('GRP/GRP/Data')
    assert shuttle.get_from_ocdb(path) is None
    out_of_range = CDBEntry({'run': 'old'}, CDBId(path, CDBRunRange(0, 5), 0))
    valid = CDBEntry({'run': 'current'}, CDBId(path, CDBRunRange(6, CDBRunRange.INFINITY), 0))
    assert shuttle.add_input_cdb_entry(out_of_range)
    assert shuttle.add_input_cdb_entry(valid)
    assert not shuttle.add_input_cdb_entry(None)
    assert not shuttle.add_input_cdb_entry(CDBEntry(None, CDBId(path, CDBRunRange(0, 1))))
    assert shuttle.get_from_ocdb(path).get_object() == {'run': 'current'}


def test_store_over_input_entry_version(shuttle):
    path = CDBPath('PMD/Calib/Gain')
    assert shuttle.add_input_cdb_entry(CDBEntry('input', CDBId(path, CDBRunRange(0, CDBRunRange.INFINITY), 3)))
    assert shuttle.store(path, 'new', CDBMetaData())
    entry = shuttle.get_from_ocdb(path)
    assert entry.get_object() == 'new'
    assert entry.get_id().version == 4


def test_log_to_file(shuttle, tmp_path):
    logdir = str(tmp_path / 'logs')
    TestShuttle.set_shuttle_log_dir(logdir)
    try:
        shuttle.log('PMD', 'hello from test')
        fname = os.path.join(logdir, 'PMD.log')
        assert os.path.exists(fname)
        with open(fname) as f:
            assert 'PMD: hello from test' in f.read()
        assert not logging.getLogger('alipy.shuttle.TestShuttle.PMD').propagate
    finally:
        TestShuttle.set_shuttle_log_dir(None)
        from alipy.utils import close_file_handlers
        close_file_handlers(logging.getLogger('alipy.shuttle.TestShuttle.PMD'))


def test_log_without_dir(shuttle, caplog):
    with caplog.at_level(logging.INFO, logger='alipy.shuttle.TestShuttle'):
        shuttle.log('PMD', 'console only')
    assert 'PMD: console only' in caplog.text


def test_configuration(tmp_path):
    saved = TestShuttle.main_cdb, TestShuttle.shuttle_temp_dir
    try:
        TestShuttle.set_main_cdb('local://mycdb')
        tmpdir = str(tmp_path / 'tmp')
        TestShuttle.set_shuttle_temp_dir(tmpdir)
        assert TestShuttle.main_cdb == 'local://mycdb'
        assert os.path.isdir(tmpdir)
    finally:
        TestShuttle.main_cdb, TestShuttle.shuttle_temp_dir = saved


def test_cdb_types():
    path = CDBPath('PMD', 'Calib', 'Gain')
    assert path == CDBPath('PMD/Calib/Gain')
    assert (path.get_level0(), path.get_level1(), path.get_level2()) == ('PMD', 'Calib', 'Gain')
    for bad in ('PMD/Calib', 'PMD//Gain', 'A/B/C/D'):
        with pytest.raises(ValueError):
            CDBPath(bad)
    with pytest.raises(ValueError):
        CDBRunRange(5, 4)
    rr = CDBRunRange(3, 8)
    assert rr.contains_run(3) and rr.contains_run(8) and not rr.contains_run(9)
    assert rr.overlaps(CDBRunRange(8, 10)) and not rr.overlaps(CDBRunRange(9, 10))
    md = CDBMetaData()
    md.set_property('key', 1)
    assert md.get_property('key') == 1
    assert md.remove_property('key') and md.get_property('key') is None
