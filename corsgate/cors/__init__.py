# CORS package

from corsgate.cors.evaluator import ALLOW_ORIGIN_HEADER, apply_cors, evaluate, merge_headers
from corsgate.cors.policy import (
    AccessControlPolicy,
    NoPolicy,
    OriginSet,
    SingleOrigin,
    Wildcard,
    parse_allow_origin,
)

__all__ = [
    "ALLOW_ORIGIN_HEADER",
    "AccessControlPolicy",
    "NoPolicy",
    "OriginSet",
    "SingleOrigin",
    "Wildcard",
    "apply_cors",
    "evaluate",
    "merge_headers",
    "parse_allow_origin",
]
