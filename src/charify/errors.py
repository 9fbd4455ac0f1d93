from dataclasses import dataclass


class ConfigurationError(ValueError):
    """Raised when a conversion is configured with an unusable character set."""


@dataclass(frozen=True)
class WriteFailure:
    row: int
    column: int | None  # None for the row's line terminator
    error: OSError

    def __str__(self) -> str:
        where = f"row {self.row}, end of line" if self.column is None else f"row {self.row}, column {self.column}"
        return f"{where}: {self.error}"
