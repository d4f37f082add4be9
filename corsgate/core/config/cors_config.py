"""
CORS configuration.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class CORSConfig:
    """CORS defaults applied to resources that declare no access-control block."""

    default_allow_origin: Any = None
