"""LogAck — acknowledgment produced by the logging endpoint."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LogAck:
    success: bool
    message: str | None = None
    error: str | None = None
    row: int | None = None

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "message": self.message, "row": self.row}
        return {"success": False, "error": self.error}
