"""
Endpoint resolver – fills the media type into the configured URL template.
"""

from __future__ import annotations

MEDIA_TYPE_MACRO = "{MediaType}"


def resolve_endpoint(template: str, media_type: str = "") -> str:
    """
    Replace every ``{MediaType}`` in ``template`` with ``media_type``.

    The value is inserted verbatim (no URL encoding) and an empty hint leaves
    an empty path segment behind. A template without the macro is returned
    unchanged.
    """
    return template.replace(MEDIA_TYPE_MACRO, media_type)
