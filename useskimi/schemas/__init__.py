"""
Pydantic schemas for OpenRTB 2.6 and the usEskimi extension payloads,
plus the request/response containers exchanged with the host.
"""

from useskimi.schemas.adapter import (
    BidderResponse,
    BidType,
    RequestData,
    ResponseData,
    TypedBid,
)
from useskimi.schemas.ext import ImpExtBidder, ReqBodyExt, ReqBodyExtBidder
from useskimi.schemas.openrtb import (
    Banner,
    Bid,
    BidRequest,
    BidResponse,
    Imp,
    Native,
    SeatBid,
    Video,
)

__all__ = [
    # Host containers
    "BidderResponse",
    "BidType",
    "RequestData",
    "ResponseData",
    "TypedBid",
    # Extension payloads
    "ImpExtBidder",
    "ReqBodyExt",
    "ReqBodyExtBidder",
    # OpenRTB 2.6
    "BidRequest",
    "BidResponse",
    "Bid",
    "SeatBid",
    "Imp",
    "Banner",
    "Video",
    "Native",
]
