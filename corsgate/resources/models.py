from typing import Any

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from corsgate.cors.policy import AccessControlPolicy

SUPPORTED_METHODS = frozenset({"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"})


class MethodResponse(BaseModel):
    """Represents the response a resource returns for one HTTP method."""

    model_config = ConfigDict(frozen=True)

    body: str = ""
    status: int = Field(default=200, ge=100, le=599)
    media_type: str = "text/plain"


class Resource(BaseModel):
    """A web resource: its path, the methods it answers, and its access-control policy."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str = "/"
    methods: dict[str, MethodResponse] = Field(default_factory=dict)
    access_control: InstanceOf[AccessControlPolicy] = Field(
        default_factory=AccessControlPolicy, alias="access-control"
    )

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"Resource path must start with '/', got {value!r}")
        return value

    @field_validator("methods", mode="before")
    @classmethod
    def _normalize_methods(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value

        methods: dict[str, Any] = {}
        for name, response in value.items():
            method = str(name).upper()
            if method not in SUPPORTED_METHODS:
                raise ValueError(f"Unsupported method: {name}")
            # A bare string is shorthand for a 200 text/plain body
            methods[method] = {"body": response} if isinstance(response, str) else response
        return methods

    @field_validator("access_control", mode="before")
    @classmethod
    def _parse_access_control(cls, value: Any) -> AccessControlPolicy:
        # AccessControlConfigError is a ValueError, so pydantic reports it as a validation error
        return AccessControlPolicy.from_config(value)

    def response_for(self, method: str) -> MethodResponse | None:
        """Return the declared response for ``method``; HEAD falls back to GET."""
        response = self.methods.get(method)
        if response is None and method == "HEAD":
            response = self.methods.get("GET")
        return response

    @property
    def allowed_methods(self) -> list[str]:
        methods = set(self.methods)
        if "GET" in methods:
            methods.add("HEAD")
        return sorted(methods)
