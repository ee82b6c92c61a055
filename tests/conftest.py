"""
Pytest configuration and fixtures.
"""

import os

os.environ.setdefault("USESKIMI_ENV", "test")

from typing import Any  # noqa: E402

import pytest  # noqa: E402

from useskimi.adapter.bidder import UsEskimiAdapter  # noqa: E402
from useskimi.schemas.openrtb import BidRequest  # noqa: E402

TEST_ENDPOINT = "https://test.useskimi.example.com/{MediaType}/openrtb"


@pytest.fixture
def endpoint() -> str:
    """Endpoint template used by the adapter under test."""
    return TEST_ENDPOINT


@pytest.fixture
def adapter() -> UsEskimiAdapter:
    """Adapter configured with the test endpoint."""
    return UsEskimiAdapter(endpoint=TEST_ENDPOINT)


@pytest.fixture
def sample_bid_request_data() -> dict[str, Any]:
    """Auction with a banner, a video and a native impression."""
    return {
        "id": "auction-1",
        "imp": [
            {
                "id": "imp-banner",
                "banner": {"format": [{"w": 300, "h": 250}]},
                "tagid": "top-slot",
                "ext": {"bidder": {"placementId": "1001", "mediaType": "banner"}},
            },
            {
                "id": "imp-video",
                "video": {"mimes": ["video/mp4"], "w": 640, "h": 480},
                "ext": {"bidder": {"placementId": "1002", "mediaType": "video"}},
            },
            {
                "id": "imp-native",
                "native": {"request": "{\"ver\":\"1.2\"}", "ver": "1.2"},
                "ext": {"bidder": {"placementId": "1003"}},
            },
        ],
        "site": {"page": "https://publisher.example.com/article", "publisher": {"id": "pub-1"}},
        "device": {"ua": "Mozilla/5.0", "ip": "203.0.113.7"},
        "user": {"buyeruid": "buyer-1"},
        "cur": ["USD"],
        "tmax": 500,
    }


@pytest.fixture
def sample_bid_request(sample_bid_request_data: dict[str, Any]) -> BidRequest:
    """Parsed version of ``sample_bid_request_data``."""
    return BidRequest.model_validate(sample_bid_request_data)
