"""ClientMetadata value object — environment of the client asking to log."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClientMetadata:
    user_agent: str = ""
    language: str = ""
    platform: str = ""
    screen_width: int = 0
    screen_height: int = 0

    @property
    def screen_resolution(self) -> str:
        return f"{self.screen_width}x{self.screen_height}"
