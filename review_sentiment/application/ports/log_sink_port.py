"""Port interface for transmitting log records."""

from abc import ABC, abstractmethod

from review_sentiment.domain.entities.log_record import LogRecord


class LogSinkPort(ABC):
    @abstractmethod
    async def send(self, record: LogRecord) -> None:
        """Transmit one record, best-effort and unconfirmed.

        Returning normally only means the request left this process;
        the endpoint's acknowledgment is never read. Raises
        EndpointUnreachableError on network-level failure.
        """
        ...
