"""
usEskimi bidder adapter: request fan-out and response mapping.
"""

from useskimi.adapter.bidder import UsEskimiAdapter, build_adapter
from useskimi.adapter.endpoint import MEDIA_TYPE_MACRO, resolve_endpoint
from useskimi.adapter.ext_parser import media_type, parse_imp_ext, placement_id
from useskimi.adapter.request_builder import REQUEST_HEADERS, build_request, build_requests
from useskimi.adapter.response_mapper import map_response, media_type_for_imp

__all__ = [
    "UsEskimiAdapter",
    "build_adapter",
    "MEDIA_TYPE_MACRO",
    "resolve_endpoint",
    "placement_id",
    "media_type",
    "parse_imp_ext",
    "REQUEST_HEADERS",
    "build_request",
    "build_requests",
    "map_response",
    "media_type_for_imp",
]
