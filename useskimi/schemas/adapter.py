"""
Data exchanged between the adapter and the host that drives it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from useskimi.schemas.openrtb import Bid

DEFAULT_CURRENCY = "USD"


class BidType(str, Enum):
    """Media type a bid is classified as."""

    BANNER = "banner"
    VIDEO = "video"
    AUDIO = "audio"
    NATIVE = "native"


@dataclass(frozen=True)
class RequestData:
    """One outbound HTTP call to the exchange."""

    method: str
    uri: str
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)
    imp_ids: list[str] = field(default_factory=list)  # Impressions this call carries


@dataclass(frozen=True)
class ResponseData:
    """Raw HTTP response handed back by the transport."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class TypedBid:
    """A bid with its resolved media type."""

    bid: Bid
    bid_type: BidType


@dataclass
class BidderResponse:
    """Bids produced from one exchange response."""

    currency: str = DEFAULT_CURRENCY
    bids: list[TypedBid] = field(default_factory=list)
