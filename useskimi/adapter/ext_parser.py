"""
Extension parser – reads the bidder params out of ``imp.ext``.

The placement id routes the request on the exchange side, so a missing or
malformed value fails the whole invocation. The media type only shapes the
endpoint URL and falls back to an empty string.
"""

from __future__ import annotations

from typing import Any, Optional

from useskimi.common.exceptions import BadInputError
from useskimi.schemas.ext import ImpExtBidder
from useskimi.schemas.openrtb import Imp


def _bidder_section(ext: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    if not isinstance(ext, dict):
        return None
    bidder = ext.get("bidder")
    return bidder if isinstance(bidder, dict) else None


def placement_id(ext: Optional[dict[str, Any]]) -> str:
    """
    Return ``bidder.placementId`` from an impression extension.

    Raises:
        BadInputError: The path is missing or the value is not a string.
    """
    bidder = _bidder_section(ext)
    if bidder is None:
        raise BadInputError(
            "Impression ext is missing the bidder object",
            {"path": "bidder"},
        )

    if "placementId" not in bidder:
        raise BadInputError(
            "Key path not found: bidder.placementId",
            {"path": "bidder.placementId"},
        )

    value = bidder["placementId"]
    if not isinstance(value, str):
        raise BadInputError(
            "Value is not a string: bidder.placementId",
            {"path": "bidder.placementId", "type": type(value).__name__},
        )
    return value


def media_type(ext: Optional[dict[str, Any]]) -> str:
    """Return ``bidder.mediaType``, or ``""`` when it is absent or not a string."""
    bidder = _bidder_section(ext)
    if bidder is None:
        return ""
    value = bidder.get("mediaType")
    return value if isinstance(value, str) else ""


def parse_imp_ext(imp: Imp) -> ImpExtBidder:
    """Decode the bidder params of ``imp``, failing on a bad placement id."""
    try:
        pid = placement_id(imp.ext)
    except BadInputError as e:
        e.details["imp_id"] = imp.id
        raise
    return ImpExtBidder(placement_id=pid, media_type=media_type(imp.ext))
