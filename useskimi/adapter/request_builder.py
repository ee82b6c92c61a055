"""
Request builder – fans an auction request out into one call per impression.
"""

from __future__ import annotations

from useskimi.adapter.endpoint import resolve_endpoint
from useskimi.adapter.ext_parser import parse_imp_ext
from useskimi.common.exceptions import SerializationError
from useskimi.common.logger import get_logger
from useskimi.schemas.adapter import RequestData
from useskimi.schemas.ext import ReqBodyExt
from useskimi.schemas.openrtb import BidRequest, Imp

logger = get_logger(__name__)

REQUEST_HEADERS: dict[str, str] = {
    "Content-Type": "application/json;charset=utf-8",
    "Accept": "application/json",
}


def encode_request(request: BidRequest) -> bytes:
    """Serialize a bid request to JSON, leaving out unset fields."""
    try:
        return request.model_dump_json(exclude_none=True).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Failed to encode bid request: {e}",
            {"request_id": request.id},
        ) from e


def build_request(request: BidRequest, imp: Imp, endpoint: str) -> RequestData:
    """
    Build the exchange call carrying only ``imp``.

    The impression's ext is replaced by the exchange's bidder object; the
    endpoint's media type comes from the ext as it was received.
    """
    params = parse_imp_ext(imp)

    single_imp = imp.model_copy(
        update={"ext": ReqBodyExt.for_placement(params.placement_id).to_ext()}
    )
    single_request = request.model_copy(update={"imp": [single_imp]})

    uri = resolve_endpoint(endpoint, params.media_type)
    body = encode_request(single_request)

    logger.debug(
        "Built exchange request",
        request_id=request.id,
        imp_id=imp.id,
        uri=uri,
        body_size=len(body),
    )

    return RequestData(
        method="POST",
        uri=uri,
        body=body,
        headers=dict(REQUEST_HEADERS),
        imp_ids=single_request.imp_ids,
    )


def build_requests(request: BidRequest, endpoint: str) -> list[RequestData]:
    """
    Build one exchange call per impression, in request order.

    The first failing impression aborts the batch; no partial list is
    returned.

    Raises:
        BadInputError: An impression has no usable placement id.
        SerializationError: A request could not be encoded.
    """
    return [build_request(request, imp, endpoint) for imp in request.imp]
