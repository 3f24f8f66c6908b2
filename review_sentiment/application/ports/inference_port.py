"""Port interface for the text-classification inference engine."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from review_sentiment.domain.value_objects.raw_classification import RawClassification

ProgressCallback = Callable[[dict], None]


class InferencePort(ABC):
    @property
    @abstractmethod
    def model_name(self) -> str:
        ...

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """True once initialize() has completed successfully."""
        ...

    @abstractmethod
    async def initialize(self, on_progress: ProgressCallback | None = None) -> None:
        """Fetch and load the model.

        on_progress receives dicts like {"status": "downloading", "progress": 0.4}.
        Raises if the model cannot be fetched or loaded.
        """
        ...

    @abstractmethod
    async def classify(self, text: str) -> list[RawClassification]:
        """Return classifications ranked by descending score."""
        ...
