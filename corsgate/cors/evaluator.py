"""Origin policy evaluation.

``evaluate`` decides, for one request, which access-control response headers
to add. It is a pure function: it never logs, raises, or mutates the policy,
so it can be called from any number of concurrent request handlers.
"""

from collections.abc import Mapping, MutableMapping

from corsgate.cors.policy import (
    WILDCARD,
    AccessControlPolicy,
    AllowOrigin,
    NoPolicy,
    OriginSet,
    SingleOrigin,
    Wildcard,
)

ALLOW_ORIGIN_HEADER = "access-control-allow-origin"
ORIGIN_HEADER = "origin"

HeaderDelta = dict[str, str]


def evaluate(policy: AccessControlPolicy | AllowOrigin, request_origin: str | None) -> HeaderDelta | None:
    """Return the headers to add for ``request_origin``, or None for no CORS headers.

    Args:
        policy: A resource's access-control policy, or just its allow-origin variant.
        request_origin: Value of the request's ``Origin`` header, None if absent.

    Returns:
        ``{"access-control-allow-origin": value}`` when the origin is allowed, else None.
    """
    if request_origin is None:
        return None

    allow_origin = policy.allow_origin if isinstance(policy, AccessControlPolicy) else policy

    if isinstance(allow_origin, NoPolicy):
        return None

    if isinstance(allow_origin, Wildcard):
        return {ALLOW_ORIGIN_HEADER: WILDCARD}

    if isinstance(allow_origin, SingleOrigin):
        if allow_origin.origin == request_origin:
            return {ALLOW_ORIGIN_HEADER: allow_origin.origin}
        return None

    if isinstance(allow_origin, OriginSet):
        if request_origin in allow_origin:
            return {ALLOW_ORIGIN_HEADER: request_origin}
        return None

    return None


def merge_headers(headers: MutableMapping[str, str], delta: HeaderDelta | None) -> None:
    """Merge ``delta`` into a response's headers; leave them untouched when None."""
    if delta is None:
        return
    for name, value in delta.items():
        headers[name] = value


def apply_cors(
    policy: AccessControlPolicy,
    request_headers: Mapping[str, str],
    response_headers: MutableMapping[str, str],
) -> HeaderDelta | None:
    """Evaluate ``policy`` against a request's Origin header and merge the result.

    ``request_headers`` should be case-insensitive (e.g. Starlette ``Headers``);
    a plain dict is looked up with the lowercase header name.
    """
    delta = evaluate(policy, request_headers.get(ORIGIN_HEADER))
    merge_headers(response_headers, delta)
    return delta
