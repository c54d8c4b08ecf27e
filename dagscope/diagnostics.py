"""Process-wide diagnostic hook for readable tracebacks on unexpected failures."""

from __future__ import annotations

from rich.traceback import install

from dagscope.logger import logger

_installed = False


def init() -> bool:
    """Install rich tracebacks once per process; return True on the call that did it."""
    global _installed
    if _installed:
        return False
    install(show_locals=False)
    _installed = True
    logger.debug("Rich traceback handler installed")
    return True
