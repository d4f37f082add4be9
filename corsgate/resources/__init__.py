# Resources package

from corsgate.resources.loader import YamlResourceLoader
from corsgate.resources.models import MethodResponse, Resource

__all__ = [
    "MethodResponse",
    "Resource",
    "YamlResourceLoader",
]
