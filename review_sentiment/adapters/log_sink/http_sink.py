"""HTTP log sink — implements LogSinkPort with a single fire-and-forget POST."""

from __future__ import annotations

import logging

import httpx

from review_sentiment.application.ports.log_sink_port import LogSinkPort
from review_sentiment.config import settings
from review_sentiment.domain.entities.log_record import LogRecord
from review_sentiment.domain.errors import EndpointNotConfiguredError, EndpointUnreachableError

logger = logging.getLogger(__name__)


class HttpLogSink(LogSinkPort):
    """POSTs each record as JSON to the logging endpoint.

    The response is deliberately not inspected: the endpoint's
    acknowledgment is out of reach for the caller, so only network-level
    failures surface.
    """

    def __init__(
        self,
        endpoint_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = settings.log_endpoint_url if endpoint_url is None else endpoint_url
        self._timeout = timeout or settings.log_request_timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._url)

    async def send(self, record: LogRecord) -> None:
        if not self.is_configured:
            raise EndpointNotConfiguredError(
                "Logging endpoint not configured. Please set LOG_ENDPOINT_URL."
            )

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self._url, json=record.to_payload())
        except httpx.TransportError as e:
            logger.warning("Logging endpoint %s unreachable: %s", self._url, e)
            raise EndpointUnreachableError(f"Failed to reach logging endpoint: {e}") from e

        logger.debug("Logging endpoint answered HTTP %d (not inspected)", response.status_code)
