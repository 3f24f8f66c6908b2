"""Port interface for the review dataset."""

from abc import ABC, abstractmethod


class ReviewSourcePort(ABC):
    @abstractmethod
    async def load(self) -> list[str]:
        """Return non-empty, trimmed review texts.

        Raises ResourceLoadFailureError if the resource is unreachable
        or yields zero valid rows.
        """
        ...
