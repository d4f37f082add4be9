"""Tests for the Resource model."""

import pytest
from pydantic import ValidationError

from corsgate.cors.policy import AccessControlPolicy, NoPolicy, OriginSet, Wildcard
from corsgate.resources.models import MethodResponse, Resource


class TestResource:
    """Tests for Resource validation."""

    def test_string_method_shorthand(self) -> None:
        resource = Resource.model_validate({"methods": {"get": "Hello"}})
        assert resource.path == "/"
        assert resource.methods == {"GET": MethodResponse(body="Hello")}
        assert resource.methods["GET"].status == 200
        assert resource.methods["GET"].media_type == "text/plain"

    def test_full_method_response(self) -> None:
        resource = Resource.model_validate(
            {"methods": {"POST": {"body": '{"ok": true}', "status": 201, "media_type": "application/json"}}}
        )
        assert resource.methods["POST"] == MethodResponse(body='{"ok": true}', status=201, media_type="application/json")

    def test_access_control_alias(self) -> None:
        resource = Resource.model_validate(
            {
                "methods": {"get": "Hello"},
                "access-control": {"allow-origin": ["http://localhost", "http://yada.juxt.pro"]},
            }
        )
        assert resource.access_control.allow_origin == OriginSet(("http://localhost", "http://yada.juxt.pro"))

    def test_access_control_by_field_name(self) -> None:
        resource = Resource(methods={"GET": "Hello"}, access_control={"allow-origin": "*"})
        assert resource.access_control.allow_origin == Wildcard()

    def test_access_control_accepts_policy_instance(self) -> None:
        policy = AccessControlPolicy(allow_origin=Wildcard())
        resource = Resource(methods={"GET": "Hello"}, access_control=policy)
        assert resource.access_control is policy

    def test_access_control_defaults_to_no_policy(self) -> None:
        resource = Resource.model_validate({"methods": {"get": "Hello"}})
        assert resource.access_control.allow_origin == NoPolicy()

    def test_invalid_access_control_is_a_validation_error(self) -> None:
        with pytest.raises(ValidationError, match="allow-origin"):
            Resource.model_validate({"methods": {"get": "Hello"}, "access-control": {"allow-origin": []}})

    def test_unsupported_method(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported method"):
            Resource.model_validate({"methods": {"brew": "coffee"}})

    def test_path_must_be_absolute(self) -> None:
        with pytest.raises(ValidationError):
            Resource.model_validate({"path": "hello", "methods": {"get": "Hello"}})

    def test_allowed_methods_sorted(self) -> None:
        resource = Resource.model_validate({"methods": {"put": "", "get": "", "delete": ""}})
        assert resource.allowed_methods == ["DELETE", "GET", "HEAD", "PUT"]

    def test_head_falls_back_to_get(self) -> None:
        resource = Resource.model_validate({"methods": {"get": "Hello"}})
        assert resource.response_for("HEAD") == resource.methods["GET"]
        assert resource.response_for("POST") is None

    def test_resource_is_frozen(self) -> None:
        resource = Resource.model_validate({"methods": {"get": "Hello"}})
        with pytest.raises(ValidationError):
            resource.path = "/other"  # type: ignore[misc]
