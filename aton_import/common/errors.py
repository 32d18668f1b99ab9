"""Domain errors and failure typing."""


class PipelineError(Exception):
    """Base class for import failures."""

    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class ContractError(PipelineError):
    """Raised when entity identity contracts are broken."""

    error_code = "CONTRACT_ERROR"


class StageError(PipelineError):
    """Raised for run failures that should halt in strict mode."""

    error_code = "STAGE_ERROR"


class MalformedFieldError(PipelineError):
    """Raised when a structurally required column does not hold a usable value."""

    error_code = "MALFORMED_FIELD"

    def __init__(self, column: str, value: object, reason: str = "not numeric") -> None:
        super().__init__(f"Column {column} {reason}: {value!r}")
        self.column = column
        self.value = value
        self.reason = reason
