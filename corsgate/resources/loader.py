"""
YAML-based resource loader.

Loads resource definitions from a YAML file, implementing the ResourceLoader interface.
"""

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from corsgate.core.errors import ResourceDefinitionError, ResourcesFileNotFoundError
from corsgate.core.utils.logging import log_operation
from corsgate.resources.interface import ResourceLoader
from corsgate.resources.models import Resource

logger = structlog.get_logger(__name__)

ACCESS_CONTROL_KEYS = ("access-control", "access_control")


class YamlResourceLoader(ResourceLoader):
    """
    Loads resources from a YAML file of the form ``{"resources": [...]}``.

    Resources that declare no ``access-control`` block get ``default_allow_origin``
    as their ``allow-origin`` setting when one is given.
    """

    def __init__(self, path: str | Path, default_allow_origin: Any = None):
        self.path = Path(path)
        self.default_allow_origin = default_allow_origin

    async def get_resources(self) -> list[Resource]:
        async with log_operation("resource_loading", file=str(self.path)):
            if not self.path.is_file():
                raise ResourcesFileNotFoundError(f"Resources file not found: {self.path}")

            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
            return self.parse_resources(data)

    def parse_resources(self, data: Any) -> list[Resource]:
        if data is None:
            logger.warning("resources_file_empty", file=str(self.path))
            return []
        if not isinstance(data, dict) or not isinstance(data.get("resources"), list):
            raise ResourceDefinitionError(f"{self.path}: expected a 'resources' list at the top level")

        resources: list[Resource] = []
        seen_paths: set[str] = set()
        for index, entry in enumerate(data["resources"]):
            resource = self._parse_resource(index, entry)
            if resource.path in seen_paths:
                raise ResourceDefinitionError(f"{self.path}: resource #{index} repeats path {resource.path}")
            seen_paths.add(resource.path)
            resources.append(resource)

        logger.info("resources_loaded", file=str(self.path), count=len(resources))
        return resources

    def _parse_resource(self, index: int, entry: Any) -> Resource:
        if not isinstance(entry, dict):
            raise ResourceDefinitionError(f"{self.path}: resource #{index} must be a mapping")

        entry = dict(entry)
        has_access_control = any(key in entry for key in ACCESS_CONTROL_KEYS)
        if not has_access_control and self.default_allow_origin is not None:
            entry["access-control"] = {"allow-origin": self.default_allow_origin}

        try:
            return Resource.model_validate(entry)
        except ValidationError as e:
            raise ResourceDefinitionError(f"{self.path}: resource #{index} is invalid: {e}") from e
