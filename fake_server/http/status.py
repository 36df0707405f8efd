from http import HTTPStatus
from typing import Dict, Tuple

from fake_server.logger import get_logger

logger = get_logger(__name__)

HTTP_STATUSES = {status.value: status.phrase for status in HTTPStatus}

SUCCESS: Tuple[Tuple[str, int], ...] = (
    ("ok", 200),
    ("created", 201),
    ("accepted", 202),
    ("non_authoritative_information", 203),
    ("no_content", 204),
    ("reset_content", 205),
    ("partial_content", 206),
    ("multi_status", 207),
    ("already_reported", 208),
    ("im_used", 226),
)

CLIENT_ERROR: Tuple[Tuple[str, int], ...] = (
    ("bad_request", 400),
    ("unauthorized", 401),
    ("payment_required", 402),
    ("forbidden", 403),
    ("not_found", 404),
    ("method_not_allowed", 405),
    ("not_acceptable", 406),
    ("proxy_authentication_required", 407),
    ("request_timeout", 408),
    ("conflict", 409),
    ("gone", 410),
    ("length_required", 411),
    ("precondition_failed", 412),
    ("payload_too_large", 413),
    ("uri_too_long", 414),
    ("unsupported_media_type", 415),
    ("expectation_failed", 417),
    ("im_a_teapot", 418),
    ("misdirected_request", 421),
    ("unprocessable_entity", 422),
    ("locked", 423),
    ("failed_dependency", 424),
    ("upgrade_required", 426),
    ("precondition_required", 428),
    ("too_many_requests", 429),
    ("request_header_fields_too_large", 431),
    ("unavailable_for_legal_reasons", 451),
)

SERVER_ERROR: Tuple[Tuple[str, int], ...] = (
    ("internal_server_error", 500),
    ("not_implemented", 501),
    ("bad_gateway", 502),
    ("service_unavailable", 503),
    ("gateway_timeout", 504),
    ("http_version_not_supported", 505),
    ("variant_also_negotiates", 506),
    ("insufficient_storage", 507),
    ("loop_detected", 508),
    ("not_extended", 510),
    ("network_authentication_required", 511),
)

STATUS_CODES: Dict[str, int] = dict(SUCCESS + CLIENT_ERROR + SERVER_ERROR)


class UnknownStatusError(ValueError):
    pass


def code_for(name: str) -> int:
    try:
        return STATUS_CODES[name]
    except KeyError:
        logger.debug("Unknown status name %r", name)
        raise UnknownStatusError(f"Wrong status name {name}") from None


def reason_phrase(code: int) -> str:
    return HTTP_STATUSES.get(code, "")
