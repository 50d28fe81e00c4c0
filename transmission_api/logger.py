import sys

from loguru import logger

from .config import Config


VERBOSE = Config.VERBOSE
LOG_PATH = Config.LOG_PATH
LOG_LEVEL = Config.LOG_LEVEL
LOG_ROTATION = Config.LOG_ROTATION
LOG_RETENTION = Config.LOG_RETENTION


_console_sink = None


def add_file_sink():
    if not LOG_PATH:
        return None
    return logger.add(
        LOG_PATH,
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level=LOG_LEVEL,
    )


def enable_console(level=LOG_LEVEL):
    """Mirror log records to stderr. Safe to call more than once."""
    global _console_sink

    if _console_sink is None:
        _console_sink = logger.add(sys.stderr, level=level)
    return _console_sink


def setup_cli_logging(verbose=False):
    """Route the command-line tool's output to the log file only.

    The CLI owns its process, so loguru's default stderr sink is dropped
    and stderr is kept for error messages unless verbose is set.
    """
    global _console_sink

    logger.remove()
    _console_sink = None
    add_file_sink()
    if verbose or VERBOSE:
        enable_console()


# Log to a file
add_file_sink()

# Log to console
if VERBOSE:
    enable_console()
