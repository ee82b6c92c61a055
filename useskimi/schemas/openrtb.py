"""
OpenRTB 2.6 Bid Request / Response schemas.

Reference: IAB OpenRTB 2.6 Specification
https://iabtechlab.com/standards/openrtb/

The adapter forwards requests it does not own, so every object accepts
unknown fields and every optional field defaults to ``None``. Serializing
with ``exclude_none=True`` then reproduces the payload that was received.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class OpenRTBObject(BaseModel):
    """Base for OpenRTB objects; unknown fields are kept as-is."""

    model_config = {"extra": "allow"}


# ============================================================================
# OpenRTB 2.6 – Bid Request objects
# ============================================================================

class Geo(OpenRTBObject):
    """Geographic location (Section 3.2.19)."""

    lat: Optional[float] = None
    lon: Optional[float] = None
    type: Optional[int] = None          # 1=GPS, 2=IP, 3=User
    country: Optional[str] = None       # ISO-3166-1 Alpha-3
    region: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    ext: Optional[dict[str, Any]] = None


class Device(OpenRTBObject):
    """Device information (Section 3.2.18)."""

    ua: Optional[str] = None
    ip: Optional[str] = None
    ipv6: Optional[str] = None
    geo: Optional[Geo] = None
    devicetype: Optional[int] = None
    make: Optional[str] = None
    model: Optional[str] = None
    os: Optional[str] = None
    osv: Optional[str] = None
    ifa: Optional[str] = None
    lmt: Optional[int] = None
    ext: Optional[dict[str, Any]] = None


class Format(OpenRTBObject):
    """Allowed banner size (Section 3.2.10)."""

    w: Optional[int] = None
    h: Optional[int] = None
    ext: Optional[dict[str, Any]] = None


class Banner(OpenRTBObject):
    """Banner impression object (Section 3.2.6)."""

    format: Optional[list[Format]] = None
    w: Optional[int] = None
    h: Optional[int] = None
    pos: Optional[int] = None
    ext: Optional[dict[str, Any]] = None


class Video(OpenRTBObject):
    """Video impression object (Section 3.2.7)."""

    mimes: Optional[list[str]] = None
    minduration: Optional[int] = None   # Minimum duration (seconds)
    maxduration: Optional[int] = None   # Maximum duration (seconds)
    protocols: Optional[list[int]] = None
    w: Optional[int] = None
    h: Optional[int] = None
    startdelay: Optional[int] = None    # 0=pre-roll, >0=mid-roll, -1=generic mid, -2=generic post
    plcmt: Optional[int] = None
    linearity: Optional[int] = None
    ext: Optional[dict[str, Any]] = None


class Native(OpenRTBObject):
    """Native impression object (Section 3.2.9)."""

    request: Optional[str] = None       # JSON-encoded Native Ad Specification request
    ver: Optional[str] = None
    api: Optional[list[int]] = None
    battr: Optional[list[int]] = None
    ext: Optional[dict[str, Any]] = None


class Imp(OpenRTBObject):
    """Impression object (Section 3.2.4)."""

    id: str = Field(..., description="Impression ID, unique within the request")
    banner: Optional[Banner] = None
    video: Optional[Video] = None
    native: Optional[Native] = None
    tagid: Optional[str] = None
    bidfloor: Optional[float] = None
    bidfloorcur: Optional[str] = None
    secure: Optional[int] = None
    ext: Optional[dict[str, Any]] = None


class Publisher(OpenRTBObject):
    """Publisher object (Section 3.2.15)."""

    id: Optional[str] = None
    name: Optional[str] = None
    domain: Optional[str] = None
    ext: Optional[dict[str, Any]] = None


class Site(OpenRTBObject):
    """Site object (Section 3.2.13)."""

    id: Optional[str] = None
    name: Optional[str] = None
    domain: Optional[str] = None
    page: Optional[str] = None
    publisher: Optional[Publisher] = None
    ext: Optional[dict[str, Any]] = None


class App(OpenRTBObject):
    """App object (Section 3.2.14)."""

    id: Optional[str] = None
    name: Optional[str] = None
    bundle: Optional[str] = None
    storeurl: Optional[str] = None
    publisher: Optional[Publisher] = None
    ext: Optional[dict[str, Any]] = None


class User(OpenRTBObject):
    """User object (Section 3.2.20)."""

    id: Optional[str] = None
    buyeruid: Optional[str] = None
    ext: Optional[dict[str, Any]] = None


class Regs(OpenRTBObject):
    """Regulatory signals (Section 3.2.3)."""

    coppa: Optional[int] = None
    gdpr: Optional[int] = None
    us_privacy: Optional[str] = None
    ext: Optional[dict[str, Any]] = None


class Source(OpenRTBObject):
    """Source object (Section 3.2.2)."""

    fd: Optional[int] = None
    tid: Optional[str] = None
    ext: Optional[dict[str, Any]] = None


class BidRequest(OpenRTBObject):
    """OpenRTB 2.6 Bid Request (Section 3.2.1)."""

    id: str = Field(..., description="Unique auction ID")
    imp: list[Imp] = Field(default_factory=list, description="Array of impression objects")
    site: Optional[Site] = None
    app: Optional[App] = None
    device: Optional[Device] = None
    user: Optional[User] = None
    test: Optional[int] = None
    at: Optional[int] = None
    tmax: Optional[int] = None
    cur: Optional[list[str]] = None
    source: Optional[Source] = None
    regs: Optional[Regs] = None
    ext: Optional[dict[str, Any]] = None

    @property
    def imp_ids(self) -> list[str]:
        """Impression IDs in request order."""
        return [imp.id for imp in self.imp]


# ============================================================================
# OpenRTB 2.6 – Bid Response objects
# ============================================================================

class Bid(OpenRTBObject):
    """Single bid (Section 4.2.3)."""

    # Absent values read as empty / zero
    id: str = Field("", description="Bidder-generated bid ID")
    impid: str = Field("", description="Impression ID from request")
    price: float = Field(0.0, description="Bid price in CPM")
    nurl: Optional[str] = None
    burl: Optional[str] = None
    adm: Optional[str] = None
    adid: Optional[str] = None
    adomain: Optional[list[str]] = None
    cid: Optional[str] = None
    crid: Optional[str] = None
    dealid: Optional[str] = None
    w: Optional[int] = None
    h: Optional[int] = None
    mtype: Optional[int] = None         # 1=banner, 2=video, 3=audio, 4=native
    ext: Optional[dict[str, Any]] = None


class SeatBid(OpenRTBObject):
    """Seat bid (Section 4.2.2)."""

    bid: Optional[list[Bid]] = Field(default_factory=list)  # null reads as empty
    seat: Optional[str] = None
    group: Optional[int] = None
    ext: Optional[dict[str, Any]] = None


class BidResponse(OpenRTBObject):
    """OpenRTB 2.6 Bid Response (Section 4.2.1)."""

    id: Optional[str] = None            # Matches BidRequest.id
    seatbid: Optional[list[SeatBid]] = Field(default_factory=list)  # null reads as empty
    bidid: Optional[str] = None
    cur: Optional[str] = None
    nbr: Optional[int] = None           # No-bid reason code (Section 5.24)
    ext: Optional[dict[str, Any]] = None
