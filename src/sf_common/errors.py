"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Generator configuration
  2xxx: Generation
  3xxx: Parsing
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Generator configuration ---

class InvalidNodeIDError(AppError):
    def __init__(self, node_id: int, max_node_id: int) -> None:
        super().__init__(
            1001,
            f"Node ID must be between 0 and {max_node_id}, got {node_id}",
            500,
        )


class InvalidEpochError(AppError):
    def __init__(self, epoch_ms: int) -> None:
        super().__init__(1002, f"Epoch is in the future: {epoch_ms}", 500)


# --- 2xxx: Generation ---

class ClockDriftExceededError(AppError):
    def __init__(self) -> None:
        super().__init__(
            2001,
            "Clock moved backwards beyond tolerance, no ID generated",
            503,
        )


# --- 3xxx: Parsing ---

class ParseError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(3001, f"Invalid snowflake ID: {detail}", 422)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
