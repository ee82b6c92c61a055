"""
usEskimi bidder adapter.

Exposes the three hooks an auction host drives:

    build_adapter   – create the adapter from its configuration
    make_requests   – OpenRTB BidRequest → exchange HTTP calls
    make_bids       – exchange HTTP response → typed bids

Both ``make_*`` hooks report failures as ``(None-or-empty, [error])`` so the
host can aggregate them with other bidders' errors. Every failure is fatal to
the invocation; partial results are never returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from useskimi.adapter.request_builder import build_requests
from useskimi.adapter.response_mapper import map_response
from useskimi.common.config import AdapterSettings, Settings, get_settings
from useskimi.common.exceptions import AdapterError, ConfigError
from useskimi.common.logger import get_logger
from useskimi.schemas.adapter import BidderResponse, RequestData, ResponseData
from useskimi.schemas.openrtb import BidRequest

logger = get_logger(__name__)


@dataclass(frozen=True)
class UsEskimiAdapter:
    """Stateless translator between OpenRTB and the usEskimi exchange."""

    endpoint: str
    bidder_name: str = "useskimi"

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "UsEskimiAdapter":
        settings = settings or get_settings()
        if not settings.adapter.enabled:
            raise ConfigError(
                f"Bidder {settings.adapter.bidder_name} is disabled",
                {"bidder": settings.adapter.bidder_name},
            )
        return build_adapter(settings.adapter.bidder_name, settings.adapter)

    def make_requests(self, request: BidRequest) -> tuple[list[RequestData], list[Exception]]:
        """Build one exchange call per impression, or none and one error."""
        try:
            requests = build_requests(request, self.endpoint)
        except AdapterError as e:
            logger.warning(
                "Failed to build exchange requests",
                bidder=self.bidder_name,
                request_id=request.id,
                error=e.message,
                details=e.details,
            )
            return [], [e]

        logger.debug(
            "Built exchange requests",
            bidder=self.bidder_name,
            request_id=request.id,
            count=len(requests),
        )
        return requests, []

    def make_bids(
        self,
        request: BidRequest,
        request_data: RequestData,
        response_data: ResponseData,
    ) -> tuple[Optional[BidderResponse], list[Exception]]:
        """Map one exchange reply to typed bids; ``(None, [])`` means no bid."""
        try:
            return map_response(request, response_data), []
        except AdapterError as e:
            logger.warning(
                "Failed to map exchange response",
                bidder=self.bidder_name,
                request_id=request.id,
                uri=request_data.uri,
                error=e.message,
            )
            return None, [e]


def build_adapter(bidder_name: str, config: AdapterSettings) -> UsEskimiAdapter:
    """Create the adapter for ``bidder_name`` from its configuration."""
    return UsEskimiAdapter(endpoint=config.endpoint, bidder_name=bidder_name)
