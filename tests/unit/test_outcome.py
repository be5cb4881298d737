"""Tests for printr.outcome and printr.exceptions."""

import pytest

from printr.exceptions import ConfigError, InputError, PrintrError, SpoolerError
from printr.outcome import PrintOutcome


class TestPrintOutcome:
    """Test outcome codes and their messages."""

    def test_only_ok_is_ok(self):
        assert PrintOutcome.OK.ok is True
        assert [o for o in PrintOutcome if o.ok] == [PrintOutcome.OK]

    @pytest.mark.parametrize(
        "outcome,message",
        [
            (PrintOutcome.OPEN_PRINTER_FAILED, "Failed to open printer!"),
            (PrintOutcome.START_JOB_FAILED, "Failed to start print job!"),
            (PrintOutcome.START_PAGE_FAILED, "Failed to start printing to page!"),
            (PrintOutcome.WRITE_DATA_FAILED, "Failed to write page data!"),
            (PrintOutcome.PARTIAL_WRITE_FAILED, "Failed to write all data to page!"),
            (PrintOutcome.FILE_READ_FAILED, "Failed to read file!"),
        ],
    )
    def test_messages(self, outcome, message):
        assert outcome.message == message

    def test_every_failure_has_distinct_message(self):
        failures = [o for o in PrintOutcome if not o.ok]
        assert len(failures) == 6
        assert len({o.message for o in failures}) == 6

    def test_string_value(self):
        assert PrintOutcome("partial_write_failed") is PrintOutcome.PARTIAL_WRITE_FAILED


class TestExceptions:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize("cls", [SpoolerError, ConfigError, InputError])
    def test_subclasses(self, cls):
        assert issubclass(cls, PrintrError)

    def test_str_without_context(self):
        assert str(PrintrError("boom")) == "boom"

    def test_str_with_context(self):
        err = SpoolerError("WritePrinter failed", context={"operation": "WritePrinter", "printer": "Zebra"})
        assert str(err) == "WritePrinter failed [operation=WritePrinter, printer=Zebra]"
