"""
Response mapper – turns an exchange HTTP response into typed bids.
"""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from useskimi.common.exceptions import BadInputError, BadServerResponseError, SerializationError
from useskimi.common.logger import get_logger
from useskimi.schemas.adapter import BidderResponse, BidType, ResponseData, TypedBid
from useskimi.schemas.openrtb import BidRequest, BidResponse, Imp

logger = get_logger(__name__)

HTTP_OK = 200
HTTP_NO_CONTENT = 204


def decode_response(body: bytes) -> BidResponse:
    """Parse an OpenRTB bid response body."""
    try:
        return BidResponse.model_validate_json(body)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0]
        loc = ".".join(str(part) for part in first["loc"])
        message = f"Failed to decode bid response: {first['msg']}"
        if loc:
            message += f" at {loc}"
        raise SerializationError(message, {"errors": errors}) from e


def media_type_for_imp(imp_id: str, imps: list[Imp]) -> BidType:
    """
    Classify a bid by the impression it targets.

    Banner wins over video, video over native.

    Raises:
        BadInputError: No impression with ``imp_id`` carries a media object.
    """
    for imp in imps:
        if imp.id != imp_id:
            continue
        if imp.banner is not None:
            return BidType.BANNER
        if imp.video is not None:
            return BidType.VIDEO
        if imp.native is not None:
            return BidType.NATIVE

    raise BadInputError(
        f'Failed to find impression "{imp_id}"',
        {"imp_id": imp_id},
    )


def map_response(request: BidRequest, response_data: ResponseData) -> Optional[BidderResponse]:
    """
    Build the bidder response for one exchange reply.

    Returns ``None`` on 204 (no bid).

    Raises:
        BadServerResponseError: Any status other than 200 or 204.
        SerializationError: The 200 body is not a valid bid response.
        BadInputError: A bid targets an unknown or media-less impression.
    """
    if response_data.status_code == HTTP_NO_CONTENT:
        return None

    if response_data.status_code != HTTP_OK:
        raise BadServerResponseError(
            f"Unexpected status code: {response_data.status_code}. "
            "Run with request.debug = 1 for more info.",
            status_code=response_data.status_code,
        )

    response = decode_response(response_data.body)

    bidder_response = BidderResponse(currency=response.cur or "")
    for seat_bid in response.seatbid or []:
        for bid in seat_bid.bid or []:
            bidder_response.bids.append(
                TypedBid(bid=bid, bid_type=media_type_for_imp(bid.impid, request.imp))
            )

    logger.debug(
        "Mapped exchange response",
        request_id=request.id,
        currency=bidder_response.currency,
        bids=len(bidder_response.bids),
    )
    return bidder_response
