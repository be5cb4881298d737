"""Shared fixtures for printr tests."""

import tempfile
import shutil
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import yaml

from printr.logging_config import reset_logging
from printr.printing.mock import MockBackend
from printr.runner import PrintJobRunner


# === Logging ===

@pytest.fixture(autouse=True)
def reset_printr_logger():
    """Drop handlers installed by setup_logging() so they never outlive a test."""
    yield
    reset_logging()


# === Environment ===

@pytest.fixture(autouse=True)
def no_config_from_environment(monkeypatch):
    """Keep a developer's $PRINTR_CONFIG out of the tests."""
    monkeypatch.delenv("PRINTR_CONFIG", raising=False)


# === Path/Directory Fixtures ===

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


# === Input Fixtures ===

def make_payload(size: int) -> bytes:
    """Deterministic non-repeating-per-chunk test data."""
    return bytes(i % 251 for i in range(size))


@pytest.fixture
def payload_file(temp_dir):
    """Create a raw input file of 250,000 bytes."""
    path = temp_dir / "label.prn"
    path.write_bytes(make_payload(250_000))
    return path


@pytest.fixture
def small_files(temp_dir):
    """Create three small raw input files."""
    paths = []
    for i, data in enumerate([b"^XA^FDone^XZ", b"^XA^FDtwo^XZ", b"^XA^FDthree^XZ"]):
        path = temp_dir / f"job{i}.zpl"
        path.write_bytes(data)
        paths.append(path)
    return paths


# === Backend Fixtures ===

@pytest.fixture
def mock_backend():
    """Mock spooler backend accepting any printer."""
    return MockBackend()


@pytest.fixture
def runner(mock_backend):
    """PrintJobRunner bound to the mock backend."""
    return PrintJobRunner(mock_backend)


# === Config Fixtures ===

@pytest.fixture
def full_config_dict():
    """Configuration dictionary with every option."""
    return {
        "backend": "mock",
        "document_name": "Shipping Labels",
        "buffer_size": 4096,
    }


@pytest.fixture
def config_file(temp_dir, full_config_dict):
    """Create a temporary config file."""
    config_path = temp_dir / "printr.yaml"
    with open(config_path, "w") as f:
        yaml.dump(full_config_dict, f)
    return config_path


# === Mock win32print ===

class FakePyWinError(Exception):
    """Stand-in for pywintypes.error."""


@pytest.fixture
def mock_win32print():
    """Mock win32print and pywintypes modules for spooler tests."""
    win32print = MagicMock()
    win32print.OpenPrinter.return_value = MagicMock(name="PyPrinterHANDLE")
    win32print.StartDocPrinter.return_value = 42
    win32print.WritePrinter.side_effect = lambda handle, data: len(data)

    pywintypes = MagicMock()
    pywintypes.error = FakePyWinError

    with patch.dict("sys.modules", {"win32print": win32print, "pywintypes": pywintypes}):
        yield win32print


@pytest.fixture
def pywin_error():
    """Exception class raised by the mocked win32print calls."""
    return FakePyWinError
