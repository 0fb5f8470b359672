import logging
import sys

def setup_logging(level=logging.INFO, log_file=None):
    """Configure the 'paracurve' logger to write to stdout, and optionally to a file.

    The library itself never configures logging; applications that want to
    see its (debug-level) messages can call this.

    Parameters:
        level: logging level, e.g. logging.DEBUG
        log_file: optional path to also write log messages to.
    """
    logger = logging.getLogger('paracurve')
    logger.setLevel(level)
    # avoid duplicate output if called more than once
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            handler.close()
            logger.removeHandler(handler)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
