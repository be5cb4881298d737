"""Factory functions for spooler backend selection."""

import sys
from typing import TYPE_CHECKING

from printr.logging_config import get_logger

if TYPE_CHECKING:
    from printr.printing.base import SpoolerBackend

logger = get_logger(__name__)

BACKEND_NAMES = ("win32", "mock")


def get_default_backend() -> "SpoolerBackend":
    """Get the appropriate spooler backend for the current platform.

    Returns:
        SpoolerBackend instance appropriate for the current OS

    Platform support:
        - Windows: Win32Backend
        - Other: MockBackend that refuses every printer
    """
    if sys.platform == "win32":
        from printr.printing.win32 import Win32Backend
        return Win32Backend()
    else:
        logger.warning("No print spooler backend for platform '%s'", sys.platform)
        from printr.printing.mock import MockBackend
        return MockBackend(printers=[])


def get_backend(name: str) -> "SpoolerBackend":
    """Get a specific spooler backend by name.

    Args:
        name: Backend name ('win32', 'mock')

    Returns:
        SpoolerBackend instance

    Raises:
        ValueError: If backend name is not recognized
        SpoolerError: If the backend is not usable on this system
    """
    backends = {
        "win32": lambda: _get_win32(),
        "mock": lambda: _get_mock(),
    }

    if name not in backends:
        available = ", ".join(sorted(backends.keys()))
        raise ValueError(f"Unknown spooler backend: '{name}'. Available: {available}")

    return backends[name]()


def _get_win32() -> "SpoolerBackend":
    from printr.printing.win32 import Win32Backend
    return Win32Backend()


def _get_mock() -> "SpoolerBackend":
    from printr.printing.mock import MockBackend
    return MockBackend()
