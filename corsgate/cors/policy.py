"""Origin policy variants for resource access control.

An ``allow-origin`` setting takes one of four shapes, each modelled as its
own frozen type so the evaluator can dispatch on the variant instead of
inspecting raw configuration values:

- ``NoPolicy``: no CORS headers are ever emitted.
- ``Wildcard``: any origin is allowed (``*``).
- ``SingleOrigin``: exactly one origin is allowed.
- ``OriginSet``: any of several origins is allowed.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from corsgate.core.errors import AccessControlConfigError

WILDCARD = "*"

ALLOW_ORIGIN_KEYS = frozenset({"allow-origin", "allow_origin"})


@dataclass(frozen=True)
class NoPolicy:
    """No origin is allowed; CORS processing is disabled."""


@dataclass(frozen=True)
class Wildcard:
    """Every origin is allowed."""


@dataclass(frozen=True)
class SingleOrigin:
    """Only ``origin`` is allowed, compared by exact string equality."""

    origin: str


@dataclass(frozen=True)
class OriginSet:
    """Any origin in ``origins`` is allowed, compared by exact string equality."""

    origins: tuple[str, ...]

    def __contains__(self, origin: object) -> bool:
        return origin in self.origins


AllowOrigin = Union[NoPolicy, Wildcard, SingleOrigin, OriginSet]


def parse_allow_origin(value: Any) -> AllowOrigin:
    """Turn a raw ``allow-origin`` configuration value into a policy variant.

    Args:
        value: None, ``"*"``, an origin string, or a sequence of origin strings.

    Returns:
        The matching policy variant.

    Raises:
        AccessControlConfigError: If the value has an unsupported shape.
    """
    if value is None:
        return NoPolicy()

    if isinstance(value, str):
        if not value.strip():
            raise AccessControlConfigError("allow-origin must not be an empty string", value)
        if value == WILDCARD:
            return Wildcard()
        return SingleOrigin(value)

    if isinstance(value, (list, tuple, set, frozenset)):
        return _parse_origin_collection(value)

    raise AccessControlConfigError(
        f"allow-origin must be a string or a list of strings, got {type(value).__name__}", value
    )


def _parse_origin_collection(values: Iterable[Any]) -> AllowOrigin:
    origins: list[str] = []
    has_wildcard = False
    for entry in values:
        if not isinstance(entry, str) or not entry.strip():
            raise AccessControlConfigError(f"allow-origin entries must be non-empty strings, got {entry!r}", entry)
        if entry == WILDCARD:
            has_wildcard = True
        elif entry not in origins:
            origins.append(entry)

    if has_wildcard:
        return Wildcard()

    if not origins:
        raise AccessControlConfigError("allow-origin must list at least one origin", list(values))

    return OriginSet(tuple(origins))


@dataclass(frozen=True)
class AccessControlPolicy:
    """Access-control settings of a resource, built once at definition time."""

    allow_origin: AllowOrigin = field(default_factory=NoPolicy)

    @classmethod
    def from_config(cls, data: Mapping[str, Any] | None) -> "AccessControlPolicy":
        """Build a policy from an ``access-control`` configuration mapping."""
        if data is None:
            return cls()
        if isinstance(data, AccessControlPolicy):
            return data
        if not isinstance(data, Mapping):
            raise AccessControlConfigError(
                f"access-control must be a mapping, got {type(data).__name__}", data
            )

        unknown = sorted(str(key) for key in data if key not in ALLOW_ORIGIN_KEYS)
        if unknown:
            raise AccessControlConfigError(f"Unsupported access-control keys: {', '.join(unknown)}", data)

        present = [key for key in ALLOW_ORIGIN_KEYS if key in data]
        if len(present) > 1:
            raise AccessControlConfigError("Use either allow-origin or allow_origin, not both", data)

        raw = data[present[0]] if present else None
        return cls(allow_origin=parse_allow_origin(raw))

    @property
    def enabled(self) -> bool:
        return not isinstance(self.allow_origin, NoPolicy)
