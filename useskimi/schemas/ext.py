"""
Impression extension shapes understood by the usEskimi exchange.

Inbound, publishers configure the bidder through ``imp.ext.bidder``::

    {"bidder": {"placementId": "123", "mediaType": "video"}}

Outbound, the exchange expects ``imp.ext`` rewritten as::

    {"bidder": {"type": "publisher", "placementId": "123"}}
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

PUBLISHER_TYPE = "publisher"


class ImpExtBidder(BaseModel):
    """Bidder params as read from the inbound ``imp.ext.bidder``."""

    placement_id: str = Field(..., alias="placementId")
    media_type: str = Field("", alias="mediaType")

    model_config = {"populate_by_name": True}


class ReqBodyExtBidder(BaseModel):
    """Bidder section of the rewritten impression extension."""

    type: str = PUBLISHER_TYPE
    placement_id: Optional[str] = Field(None, alias="placementId")

    model_config = {"populate_by_name": True}


class ReqBodyExt(BaseModel):
    """Impression extension sent to the exchange."""

    bidder: ReqBodyExtBidder

    @classmethod
    def for_placement(cls, placement_id: str) -> "ReqBodyExt":
        # An empty placement id is left out of the payload entirely
        return cls(bidder=ReqBodyExtBidder(placement_id=placement_id or None))

    def to_ext(self) -> dict[str, Any]:
        """Render as the JSON-ready mapping placed in ``imp.ext``."""
        return self.model_dump(by_alias=True, exclude_none=True)
