"""Domain errors and failure typing."""


class PipelineError(Exception):
    """Base class for scraper failures."""

    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class StageError(PipelineError):
    """Raised when a retrieval or parsing stage cannot continue."""

    error_code = "STAGE_ERROR"


class CsvFormatError(StageError):
    """Raised when a downloaded CSV body cannot be tokenised."""

    error_code = "CSV_ERROR"


class StorageError(PipelineError):
    """Raised for any failure of the local SQLite store."""

    error_code = "STORAGE_ERROR"
