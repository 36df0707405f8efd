"""
Response structure used by FakeServer to describe the replies it gives.

A response has three fields:

    - ``code``: status code, required, never validated
    - ``body``: optional, a string or a map, defaults to ``""``
    - ``headers``: optional, a map with string keys, defaults to ``{}``

Build one with :func:`new` or with the constructor named after the status
reason phrase::

    new(200, {"name": "Test User"}, {"Content-Type": "application/json"})
    created('{"name": "Test User"}')
    not_found()
"""
import dataclasses
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from .status import CLIENT_ERROR, SERVER_ERROR, SUCCESS, code_for, reason_phrase

Body = Union[str, Mapping[str, Any]]
Headers = Mapping[str, Any]

DEFAULT_MESSAGE = '{"message": "This is a default response from FakeServer"}'


@dataclasses.dataclass(frozen=True)
class Response:
    code: int
    body: Body = ""
    headers: Headers = dataclasses.field(default_factory=dict)

    def __post_init__(self):
        # read-only copy of whatever mapping was passed in
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def reason(self) -> str:
        return reason_phrase(self.code)

    def replace(self, **changes) -> "Response":
        return dataclasses.replace(self, **changes)


def new(code: int, body: Body = "", headers: Optional[Headers] = None) -> Response:
    if headers is None:
        headers = {}
    return Response(code=code, body=body, headers=headers)


def from_name(name: str, body: Body = "", headers: Optional[Headers] = None) -> Response:
    return new(code_for(name), body, headers)


def _factory(name: str) -> Callable[..., Response]:
    code = code_for(name)

    def factory(body: Body = "", headers: Optional[Headers] = None) -> Response:
        return new(code, body, headers)

    factory.__name__ = factory.__qualname__ = name
    factory.__doc__ = f"Response with status {code} {reason_phrase(code)}".rstrip()
    return factory


def _all(table: Tuple[Tuple[str, int], ...]) -> List[Response]:
    return [new(code) for _, code in table]


def all_2xx() -> List[Response]:
    return _all(SUCCESS)


def all_4xx() -> List[Response]:
    return _all(CLIENT_ERROR)


def all_5xx() -> List[Response]:
    return _all(SERVER_ERROR)


def default() -> Response:
    """Fallback response, given when nothing else is configured"""
    return new(200, DEFAULT_MESSAGE)


# 2xx
ok = _factory("ok")
created = _factory("created")
accepted = _factory("accepted")
non_authoritative_information = _factory("non_authoritative_information")
no_content = _factory("no_content")
reset_content = _factory("reset_content")
partial_content = _factory("partial_content")
multi_status = _factory("multi_status")
already_reported = _factory("already_reported")
im_used = _factory("im_used")

# 4xx
bad_request = _factory("bad_request")
unauthorized = _factory("unauthorized")
payment_required = _factory("payment_required")
forbidden = _factory("forbidden")
not_found = _factory("not_found")
method_not_allowed = _factory("method_not_allowed")
not_acceptable = _factory("not_acceptable")
proxy_authentication_required = _factory("proxy_authentication_required")
request_timeout = _factory("request_timeout")
conflict = _factory("conflict")
gone = _factory("gone")
length_required = _factory("length_required")
precondition_failed = _factory("precondition_failed")
payload_too_large = _factory("payload_too_large")
uri_too_long = _factory("uri_too_long")
unsupported_media_type = _factory("unsupported_media_type")
expectation_failed = _factory("expectation_failed")
im_a_teapot = _factory("im_a_teapot")
misdirected_request = _factory("misdirected_request")
unprocessable_entity = _factory("unprocessable_entity")
locked = _factory("locked")
failed_dependency = _factory("failed_dependency")
upgrade_required = _factory("upgrade_required")
precondition_required = _factory("precondition_required")
too_many_requests = _factory("too_many_requests")
request_header_fields_too_large = _factory("request_header_fields_too_large")
unavailable_for_legal_reasons = _factory("unavailable_for_legal_reasons")

# 5xx
internal_server_error = _factory("internal_server_error")
not_implemented = _factory("not_implemented")
bad_gateway = _factory("bad_gateway")
service_unavailable = _factory("service_unavailable")
gateway_timeout = _factory("gateway_timeout")
http_version_not_supported = _factory("http_version_not_supported")
variant_also_negotiates = _factory("variant_also_negotiates")
insufficient_storage = _factory("insufficient_storage")
loop_detected = _factory("loop_detected")
not_extended = _factory("not_extended")
network_authentication_required = _factory("network_authentication_required")
