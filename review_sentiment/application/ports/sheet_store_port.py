"""Port interface for the tabular store behind the logging endpoint."""

from abc import ABC, abstractmethod


class SheetStore(ABC):
    @abstractmethod
    async def append_row(self, sheet_name: str, header: list[str], row: list[str]) -> int:
        """Append a row, creating the sheet with *header* as row 1 if absent.

        Returns the 1-based row number the values were written to.
        """
        ...

    @abstractmethod
    async def reset_sheet(self, sheet_name: str, header: list[str]) -> None:
        """Drop the sheet if it exists and recreate it with only the header row."""
        ...

    @abstractmethod
    async def get_rows(self, sheet_name: str) -> list[list[str]]:
        """Return all rows (header included); empty if the sheet does not exist."""
        ...
