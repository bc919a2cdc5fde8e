#------------------------------
"""
:py:class:`logger` - set of utilities for standard python logging facility
==========================================================================

Usage ::

    from alipy.logger import logging, config_logger

    #loglevel is one of 'debug','info','warning','error','critical'
    config_logger(loglevel='info') #, filename='log.txt')

    logger = logging.getLogger('My_Module')
    logger.debug('This is a test message')

Created on 2026-10-17
"""
#------------------------------

import logging

DICT_LEVEL_TO_NAME = logging._levelToName # {0: 'NOTSET', 50: 'CRITICAL',...
DICT_NAME_TO_LEVEL = logging._nameToLevel # {'INFO': 20, 'WARNING': 30, 'WARN': 30,...
LEVEL_NAMES = list(logging._levelToName.values())
STR_LEVEL_NAMES = ', '.join(DICT_NAME_TO_LEVEL.keys())
TSFORMAT = '%Y-%m-%dT%H:%M:%S'

#------------------------------

def config_logger(loglevel='DEBUG',\
                  fmt='%(asctime)s %(name)s %(lineno)d %(levelname)s: %(message)s',\
                  datefmt=TSFORMAT,\
                  filename='',\
                  filemode='w') :
    """Configures root logger. Unknown level names fall back to INFO.
    """
    level = DICT_NAME_TO_LEVEL.get(loglevel.upper(), logging.INFO)

    kwa = dict(format=fmt, datefmt=datefmt, level=level)
    if filename :
        kwa.update(filename=filename, filemode=filemode)
    logging.basicConfig(**kwa)
    logging.getLogger(__name__).debug('Logger is initialized for level %s' % loglevel)

#------------------------------

def level_from_name(loglevel) :
    """Returns (int) logging level for (str) name, e.g. 'debug' -> 10; None for unknown name.
    """
    return DICT_NAME_TO_LEVEL.get(loglevel.upper(), None)

#------------------------------

if __name__ == "__main__" :
    config_logger(loglevel='DEBUG')
    logger = logging.getLogger(__name__)
    logger.debug   ('Test message logger.debug   ')
    logger.info    ('Test message logger.info    ')
    logger.warning ('Test message logger.warning ')

# EOF
