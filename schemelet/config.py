from __future__ import annotations
import logging
import os


_LOG_LEVEL_VAR = 'SCHEMELET_LOG_LEVEL'
_DEFAULT_LOG_LEVEL = logging.WARNING

_LEVELS = {
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'INFO': logging.INFO,
    'DEBUG': logging.DEBUG,
}


def get_log_level() -> int:
    raw = os.environ.get(_LOG_LEVEL_VAR)
    if not raw:
        return _DEFAULT_LOG_LEVEL
    return _LEVELS.get(raw.strip().upper(), _DEFAULT_LOG_LEVEL)
