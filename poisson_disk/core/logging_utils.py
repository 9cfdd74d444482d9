"""Logger family for poisson_disk.

Every module logs through ``get_logger('poisson_disk.<part>')``. The
``poisson_disk`` logger owns one stdout handler and does not propagate, so
configuring the package never touches the application's root logger.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = 'poisson_disk'

# third-party loggers that flood DEBUG output when plotting
_NOISY_LOGGERS = ('matplotlib', 'matplotlib.font_manager', 'PIL')

LevelLike = Union[str, int, None]


class _StdoutHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stdout`` is when a record is emitted."""

    def __init__(self):
        super().__init__()
        self.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value):
        pass


def _package_logger() -> logging.Logger:
    pkg = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, _StdoutHandler) for h in pkg.handlers):
        # the package __init__ installs a NullHandler placeholder
        for h in [h for h in pkg.handlers if isinstance(h, logging.NullHandler)]:
            pkg.removeHandler(h)
        pkg.addHandler(_StdoutHandler())
    pkg.propagate = False
    return pkg


def resolve_level(level: LevelLike, default: int = logging.INFO) -> int:
    """Map ``'debug'``, ``'INFO'``, ``10`` ... to a numeric logging level.

    Unknown names fall back to ``default``.
    """
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else default


def configure_logging(level: LevelLike = 'INFO', mute_external: bool = True) -> logging.Logger:
    """Set the level of the ``poisson_disk`` logger family and return its root."""
    pkg = _package_logger()
    lvl = resolve_level(level)
    pkg.setLevel(lvl)
    if mute_external and lvl <= logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.INFO)
    return pkg


def get_logger(name: str, level: LevelLike = None) -> logging.Logger:
    """Logger for ``name`` inside the package family.

    Names outside the family are nested under ``poisson_disk``. Without an
    explicit ``level`` the logger inherits from the family root.
    """
    _package_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + '.'):
        name = f'{PACKAGE_LOGGER}.{name}'
    log = logging.getLogger(name)
    log.setLevel(logging.NOTSET if level is None else resolve_level(level))
    return log


__all__ = ['get_logger', 'configure_logging', 'resolve_level', 'PACKAGE_LOGGER']
