import inspect
import os
import logging
from logging.handlers import RotatingFileHandler


def get_class_name(obj):
    """
    Returns the class name of the given object instance.
    """
    try:
        return obj.__class__.__name__
    except AttributeError:
        return str(type(obj))


def get_logger(name=None, level=logging.INFO, logfile=None,
               max_bytes=10*1024*1024, backup_count=3, propagate=True):
    """Returns named logging.Logger with console handler and optional rotating file handler.

    Handlers are attached once per logger name, repeated calls with the same
    name and logfile return the same configured logger.
    """
    if name is None:
        frame = inspect.stack()[1]
        module = inspect.getmodule(frame[0])
        name = module.__name__ if module else '__main__'

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = propagate

    formatter = logging.Formatter(
        '[%(asctime)s] [ALIPY-%(levelname)s] %(name)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if logfile:
        if not any(isinstance(h, RotatingFileHandler) and h.baseFilename == os.path.abspath(logfile)
                   for h in logger.handlers):
            file_handler = RotatingFileHandler(
                logfile, maxBytes=max_bytes, backupCount=backup_count
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def close_file_handlers(logger):
    """Detaches and closes all file handlers of the logger."""
    for h in list(logger.handlers):
        if isinstance(h, logging.FileHandler):
            logger.removeHandler(h)
            h.close()
