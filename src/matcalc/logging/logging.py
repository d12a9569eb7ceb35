# matcalc/logging/logging.py
import os
import logging
import sys
from pathlib import Path

from .config import load_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers configured through get_logger, keyed by name
_LOGGER_INITIALIZED = {}


def _resolve_log_dir(log_dir=None):
    if log_dir is not None:
        return Path(log_dir)
    return Path(os.environ.get("MATCALC_LOG_DIR", Path.home() / ".matcalc" / "logs"))


def _resolve_log_file(log_file=None, log_dir=None):
    if log_file is not None:
        return Path(log_file)
    return _resolve_log_dir(log_dir) / "matcalc.log"


def _default_level():
    return load_log_level() or logging.INFO


def get_logger(name="matcalc", level=None, log_file=None, log_dir=None, console=True):
    """Return the logger ``name``, attaching handlers on first use.

    The first call for a name appends to ``matcalc.log`` under ``log_dir``
    (``$MATCALC_LOG_DIR`` or ``~/.matcalc/logs``) unless ``log_file`` is given,
    and mirrors records to stderr when ``console`` is true. ``level`` defaults
    to the level saved by ``matcalc logging set-level``, else INFO. Records do
    not propagate to the root logger.

    Later calls return the configured logger and ignore their arguments.
    """
    logger = logging.getLogger(name)
    if _LOGGER_INITIALIZED.get(name, False):
        return logger

    file_path = _resolve_log_file(log_file, log_dir)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    logger.setLevel(_default_level() if level is None else level)
    logger.propagate = False
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.FileHandler(file_path, mode="a", encoding="utf-8")]
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _LOGGER_INITIALIZED[name] = True
    return logger


def reset_logger(name=None):
    """Detach and close handlers so loggers can be configured again.

    Parameters
    ----------
    name : str, optional
        Logger to reset. Every logger configured by :func:`get_logger` is reset
        when omitted.

    Examples
    --------
    >>> logger = get_logger("demo", level=logging.DEBUG, console=False)
    >>> reset_logger("demo")
    >>> logger = get_logger("demo", level=logging.INFO, console=False)
    """
    names = list(_LOGGER_INITIALIZED) if name is None else [name]

    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        _LOGGER_INITIALIZED.pop(n, None)


def get_configured_level(name="matcalc"):
    """Return the level name ``name`` logs at.

    A logger that :func:`get_logger` has not configured yet reports the level
    it would be given, i.e. the saved level or INFO.
    """

    if not _LOGGER_INITIALIZED.get(name, False):
        return logging.getLevelName(_default_level())
    return logging.getLevelName(logging.getLogger(name).getEffectiveLevel())
