"""
Resources configuration.
"""

from dataclasses import dataclass


@dataclass
class ResourcesConfig:
    """Where resource definitions are loaded from."""

    file_path: str = "resources.yaml"
