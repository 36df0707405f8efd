from . import response
from .response import (
    Response,
    accepted,
    all_2xx,
    all_4xx,
    all_5xx,
    already_reported,
    bad_gateway,
    bad_request,
    conflict,
    created,
    default,
    expectation_failed,
    failed_dependency,
    forbidden,
    from_name,
    gateway_timeout,
    gone,
    http_version_not_supported,
    im_a_teapot,
    im_used,
    insufficient_storage,
    internal_server_error,
    length_required,
    locked,
    loop_detected,
    method_not_allowed,
    misdirected_request,
    multi_status,
    network_authentication_required,
    new,
    no_content,
    non_authoritative_information,
    not_acceptable,
    not_extended,
    not_found,
    not_implemented,
    ok,
    partial_content,
    payload_too_large,
    payment_required,
    precondition_failed,
    precondition_required,
    proxy_authentication_required,
    request_header_fields_too_large,
    request_timeout,
    reset_content,
    service_unavailable,
    too_many_requests,
    unauthorized,
    unavailable_for_legal_reasons,
    unprocessable_entity,
    unsupported_media_type,
    upgrade_required,
    uri_too_long,
    variant_also_negotiates,
)
from .status import UnknownStatusError, code_for, reason_phrase
