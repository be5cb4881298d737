"""Centralized constants for printr."""

# Capacity of the transfer buffer reused across chunks of one print job
BUFFER_SIZE = 100_000

# Longest printer name passed to the spooler; longer names are truncated
MAX_PRINTER_NAME_LENGTH = 50

# Job metadata registered with the spooler
DOCUMENT_NAME = "PrintR RAW Print"
DATATYPE_RAW = "RAW"

# DOC_INFO_1 structure level
DOC_INFO_LEVEL = 1

# Environment variable naming a configuration file
CONFIG_ENV_VAR = "PRINTR_CONFIG"
