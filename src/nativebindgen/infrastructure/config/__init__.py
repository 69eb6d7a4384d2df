"""Infrastructure configuration module."""

from .application_config import Config
from .extractor_config import get_anonymous_markers, get_config

__all__ = ["Config", "get_anonymous_markers", "get_config"]
