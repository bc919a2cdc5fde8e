#------------------------------
"""
:py:class:`ShuttleConstants` - global constants of the calibration shuttle
==========================================================================

Usage ::

    import alipy.shuttle.ShuttleConstants as sc

    print(sc.dic_system_to_name[sc.DAQ])  # 'DAQ'
    print(sc.DEFAULT_SHUTTLE_DIR)

Default directories are created under environment variable ALIPY_SHUTTLE_DIR,
or under the system temporary directory if it is not defined.
"""
#------------------------------

import os
import tempfile

# Input systems

DAQ = 0
DCS = 1
HLT = 2

system_tuple = (
    (DAQ, 'DAQ'),
    (DCS, 'DCS'),
    (HLT, 'HLT'),
)

list_systems      = [rec[0] for rec in system_tuple]
list_system_names = [rec[1] for rec in system_tuple]

dic_system_to_name = dict(zip(list_systems, list_system_names))
dic_name_to_system = dict(zip(list_system_names, list_systems))

# Validity

RUN_INFINITY = 999999999

# Preprocessor return codes

PROCESS_OK = 0

# Storage and directories

DEFAULT_SHUTTLE_DIR = os.environ.get('ALIPY_SHUTTLE_DIR', os.path.join(tempfile.gettempdir(), 'alipy-shuttle'))

DEFAULT_MAIN_CDB          = 'local://%s' % os.path.join(DEFAULT_SHUTTLE_DIR, 'TestCDB')
DEFAULT_LOCAL_CDB         = 'local://%s' % os.path.join(DEFAULT_SHUTTLE_DIR, 'TestLocalCDB')
DEFAULT_MAIN_REF_STORAGE  = 'local://%s' % os.path.join(DEFAULT_SHUTTLE_DIR, 'TestReference')
DEFAULT_LOCAL_REF_STORAGE = 'local://%s' % os.path.join(DEFAULT_SHUTTLE_DIR, 'TestLocalReference')
DEFAULT_TEMP_DIR          = os.path.join(DEFAULT_SHUTTLE_DIR, 'temp')
DEFAULT_LOG_DIR           = None

#------------------------------

def system_name(system) :
    return dic_system_to_name.get(system, 'UNKNOWN-%s' % str(system))

# EOF
