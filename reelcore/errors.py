"""Error codes and exceptions for the slot machine core."""
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes raised or reported by the core."""

    INVALID_SETTING = "INVALID_SETTING"
    UNKNOWN_THEME = "UNKNOWN_THEME"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    ROUND_IN_PROGRESS = "ROUND_IN_PROGRESS"
    EMPTY_CATALOG = "EMPTY_CATALOG"


# Whether the caller can retry after the condition clears
ERROR_RECOVERABLE: dict[ErrorCode, bool] = {
    ErrorCode.INVALID_SETTING: False,
    ErrorCode.UNKNOWN_THEME: False,
    ErrorCode.INSUFFICIENT_FUNDS: True,
    ErrorCode.ROUND_IN_PROGRESS: True,
    ErrorCode.EMPTY_CATALOG: False,
}


class GameError(Exception):
    """Base game error carrying a machine-readable code."""

    def __init__(self, code: ErrorCode, message: str | None = None):
        self.code = code
        self.message = message or f"Error: {code.value}"
        self.recoverable = ERROR_RECOVERABLE[code]
        super().__init__(self.message)

    def to_dict(self) -> dict[str, object]:
        """Serialize for notification sinks."""
        return {
            "code": self.code.value,
            "message": self.message,
            "recoverable": self.recoverable,
        }
