"""
Tests for the adapter hooks driven by the auction host.
"""

import dataclasses
import json

import pytest

from useskimi.adapter.bidder import UsEskimiAdapter, build_adapter
from useskimi.common.config import AdapterSettings, Settings
from useskimi.common.exceptions import BadInputError, BadServerResponseError, ConfigError
from useskimi.schemas.adapter import BidType, ResponseData
from useskimi.schemas.openrtb import BidRequest


class TestBuildAdapter:
    """Tests for adapter construction."""

    def test_builds_from_config(self) -> None:
        config = AdapterSettings(endpoint="https://x.example/{MediaType}/bid")
        adapter = build_adapter("useskimi", config)

        assert adapter.endpoint == "https://x.example/{MediaType}/bid"
        assert adapter.bidder_name == "useskimi"

    def test_adapter_is_immutable(self, adapter: UsEskimiAdapter) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            adapter.endpoint = "https://other.example"  # type: ignore[misc]

    def test_from_settings(self) -> None:
        settings = Settings(adapter=AdapterSettings(bidder_name="eskimi", endpoint="https://e.example/{MediaType}"))
        adapter = UsEskimiAdapter.from_settings(settings)

        assert adapter.bidder_name == "eskimi"
        assert adapter.endpoint == "https://e.example/{MediaType}"

    def test_from_settings_disabled(self) -> None:
        settings = Settings(adapter=AdapterSettings(enabled=False))
        with pytest.raises(ConfigError):
            UsEskimiAdapter.from_settings(settings)


class TestMakeRequests:
    """Tests for the request hook."""

    def test_success(self, adapter: UsEskimiAdapter, sample_bid_request: BidRequest) -> None:
        requests, errors = adapter.make_requests(sample_bid_request)

        assert errors == []
        assert len(requests) == len(sample_bid_request.imp)

    def test_single_bad_impression_yields_one_error(self, adapter: UsEskimiAdapter) -> None:
        request = BidRequest(
            id="a",
            imp=[
                {"id": "ok-1", "banner": {}, "ext": {"bidder": {"placementId": "1"}}},
                {"id": "bad", "banner": {}, "ext": {"bidder": {"placementId": 42}}},
                {"id": "ok-2", "banner": {}, "ext": {"bidder": {"placementId": "3"}}},
            ],
        )
        requests, errors = adapter.make_requests(request)

        assert requests == []
        assert len(errors) == 1
        assert isinstance(errors[0], BadInputError)


class TestMakeBids:
    """Tests for the response hook."""

    def test_no_bid(self, adapter: UsEskimiAdapter, sample_bid_request: BidRequest) -> None:
        requests, _ = adapter.make_requests(sample_bid_request)
        assert adapter.make_bids(sample_bid_request, requests[0], ResponseData(status_code=204)) == (None, [])

    def test_server_error(self, adapter: UsEskimiAdapter, sample_bid_request: BidRequest) -> None:
        requests, _ = adapter.make_requests(sample_bid_request)
        response, errors = adapter.make_bids(sample_bid_request, requests[0], ResponseData(status_code=500))

        assert response is None
        assert len(errors) == 1
        assert isinstance(errors[0], BadServerResponseError)
        assert "500" in str(errors[0])

    def test_video_bid(self, adapter: UsEskimiAdapter) -> None:
        request = BidRequest(
            id="a",
            imp=[{"id": "imp1", "video": {"mimes": ["video/mp4"]}, "ext": {"bidder": {"placementId": "7"}}}],
        )
        requests, _ = adapter.make_requests(request)
        body = {"cur": "USD", "seatbid": [{"bid": [{"id": "b", "impid": "imp1", "price": 3.0}]}]}

        response, errors = adapter.make_bids(
            request, requests[0], ResponseData(status_code=200, body=json.dumps(body).encode())
        )

        assert errors == []
        assert response is not None
        assert response.bids[0].bid_type == BidType.VIDEO

    def test_unknown_impression_returns_no_bids(self, adapter: UsEskimiAdapter, sample_bid_request: BidRequest) -> None:
        requests, _ = adapter.make_requests(sample_bid_request)
        body = {"cur": "USD", "seatbid": [{"bid": [{"id": "b", "impid": "nope", "price": 1.0}]}]}

        response, errors = adapter.make_bids(
            sample_bid_request, requests[0], ResponseData(status_code=200, body=json.dumps(body).encode())
        )

        assert response is None
        assert len(errors) == 1
        assert isinstance(errors[0], BadInputError)
