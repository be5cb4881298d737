"""Result codes for a single print job."""

from enum import Enum


class PrintOutcome(str, Enum):
    """Which stage of a print job failed, or OK.

    Exactly one outcome is produced per job.
    """

    OK = "ok"
    OPEN_PRINTER_FAILED = "open_printer_failed"
    START_JOB_FAILED = "start_job_failed"
    START_PAGE_FAILED = "start_page_failed"
    WRITE_DATA_FAILED = "write_data_failed"
    PARTIAL_WRITE_FAILED = "partial_write_failed"
    FILE_READ_FAILED = "file_read_failed"

    @property
    def ok(self) -> bool:
        return self is PrintOutcome.OK

    @property
    def message(self) -> str:
        """Fixed user-facing message for this outcome."""
        return _MESSAGES[self]


_MESSAGES = {
    PrintOutcome.OK: "",
    PrintOutcome.OPEN_PRINTER_FAILED: "Failed to open printer!",
    PrintOutcome.START_JOB_FAILED: "Failed to start print job!",
    PrintOutcome.START_PAGE_FAILED: "Failed to start printing to page!",
    PrintOutcome.WRITE_DATA_FAILED: "Failed to write page data!",
    PrintOutcome.PARTIAL_WRITE_FAILED: "Failed to write all data to page!",
    PrintOutcome.FILE_READ_FAILED: "Failed to read file!",
}
