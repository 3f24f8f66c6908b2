"""Domain errors — every failure a single demo action can end with.

All errors are terminal to the action that raised them; nothing is retried.
"""


class SentimentDemoError(Exception):
    """Base class for review sentiment demo errors."""


class InvalidInputError(SentimentDemoError):
    """Text to classify is empty after trimming."""


class EngineNotReadyError(SentimentDemoError):
    """Inference engine was called before it finished initializing."""


class InvalidEngineOutputError(SentimentDemoError):
    """Inference engine returned an empty or malformed result."""


class EmptyDatasetError(SentimentDemoError):
    """No reviews are available to sample from."""


class NoAnalysisAvailableError(SentimentDemoError):
    """A log record was requested before any review was analyzed."""


class EndpointNotConfiguredError(SentimentDemoError):
    """No logging endpoint URL is configured."""


class EndpointUnreachableError(SentimentDemoError):
    """Network-level failure while transmitting a log record."""


class ResourceLoadFailureError(SentimentDemoError):
    """Dataset or inference engine failed to load at startup."""
