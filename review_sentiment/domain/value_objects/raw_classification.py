"""RawClassification value object — one (label, score) pair from the engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawClassification:
    label: str
    score: float
