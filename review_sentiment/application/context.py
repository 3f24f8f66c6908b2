"""DemoContext — explicit state of one demo session.

Replaces ambient module globals: the loaded reviews, the engine handle,
per-resource load status and the current AnalysisSession all live here
and are passed to each action.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from review_sentiment.application.ports.inference_port import InferencePort
from review_sentiment.application.ports.review_source_port import ReviewSourcePort
from review_sentiment.domain.entities.analysis_session import AnalysisSession
from review_sentiment.domain.value_objects.enums import LoadStatus


@dataclass
class ResourceState:
    status: LoadStatus = LoadStatus.LOADING
    message: str = "Loading..."
    progress: float | None = None

    def mark_ready(self, message: str) -> None:
        self.status = LoadStatus.READY
        self.message = message

    def mark_failed(self, message: str) -> None:
        self.status = LoadStatus.FAILED
        self.message = message


@dataclass
class DemoContext:
    engine: InferencePort
    review_source: ReviewSourcePort
    reviews: list[str] = field(default_factory=list)
    session: AnalysisSession = field(default_factory=AnalysisSession)
    dataset_state: ResourceState = field(default_factory=ResourceState)
    model_state: ResourceState = field(default_factory=ResourceState)

    @property
    def is_ready(self) -> bool:
        """2-of-2 join: analyze is available only once both resources loaded."""
        return (
            self.dataset_state.status == LoadStatus.READY
            and self.model_state.status == LoadStatus.READY
        )

    @property
    def has_failed(self) -> bool:
        return LoadStatus.FAILED in (self.dataset_state.status, self.model_state.status)

    @property
    def can_log(self) -> bool:
        return not self.session.is_empty()
