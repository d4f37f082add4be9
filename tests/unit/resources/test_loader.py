"""Tests for YamlResourceLoader."""

from pathlib import Path

import pytest

from corsgate.core.errors import ResourceDefinitionError, ResourcesFileNotFoundError
from corsgate.cors.policy import NoPolicy, OriginSet, SingleOrigin, Wildcard
from corsgate.resources.loader import YamlResourceLoader

RESOURCES_YAML = """
resources:
  - path: /
    methods:
      get: Hello
    access-control:
      allow-origin: "*"
  - path: /choice
    methods:
      get: Hello
    access-control:
      allow-origin:
        - http://localhost
        - http://yada.juxt.pro
  - path: /private
    methods:
      get: Secret
"""


@pytest.fixture
def resources_file(tmp_path: Path) -> Path:
    path = tmp_path / "resources.yaml"
    path.write_text(RESOURCES_YAML, encoding="utf-8")
    return path


class TestYamlResourceLoader:
    """Tests for loading resources from YAML."""

    @pytest.mark.asyncio
    async def test_loads_resources(self, resources_file: Path) -> None:
        resources = await YamlResourceLoader(resources_file).get_resources()

        assert [r.path for r in resources] == ["/", "/choice", "/private"]
        assert resources[0].access_control.allow_origin == Wildcard()
        assert resources[1].access_control.allow_origin == OriginSet(("http://localhost", "http://yada.juxt.pro"))
        assert resources[2].access_control.allow_origin == NoPolicy()

    @pytest.mark.asyncio
    async def test_default_allow_origin_applies_only_without_block(self, resources_file: Path) -> None:
        loader = YamlResourceLoader(resources_file, default_allow_origin="http://localhost")
        resources = await loader.get_resources()

        assert resources[0].access_control.allow_origin == Wildcard()
        assert resources[2].access_control.allow_origin == SingleOrigin("http://localhost")

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ResourcesFileNotFoundError):
            await YamlResourceLoader(tmp_path / "missing.yaml").get_resources()

    @pytest.mark.asyncio
    async def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert await YamlResourceLoader(path).get_resources() == []

    def test_requires_resources_list(self) -> None:
        with pytest.raises(ResourceDefinitionError, match="'resources' list"):
            YamlResourceLoader("resources.yaml").parse_resources({"resources": {"path": "/"}})

    def test_invalid_entry_names_index(self) -> None:
        data = {
            "resources": [
                {"path": "/", "methods": {"get": "Hello"}},
                {"path": "/bad", "methods": {"get": "Hello"}, "access-control": {"allow-origin": [1]}},
            ]
        }
        with pytest.raises(ResourceDefinitionError, match="resource #1"):
            YamlResourceLoader("resources.yaml").parse_resources(data)

    def test_non_mapping_entry(self) -> None:
        with pytest.raises(ResourceDefinitionError, match="resource #0 must be a mapping"):
            YamlResourceLoader("resources.yaml").parse_resources({"resources": ["/"]})

    def test_duplicate_paths(self) -> None:
        data = {"resources": [{"path": "/", "methods": {"get": "a"}}, {"path": "/", "methods": {"get": "b"}}]}
        with pytest.raises(ResourceDefinitionError, match="repeats path"):
            YamlResourceLoader("resources.yaml").parse_resources(data)
