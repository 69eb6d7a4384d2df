"""nativebindgen - ABI description extraction from C/C++ headers via libclang."""

from .application import AbiExtractor
from .infrastructure.config import Config
from .main import main

__all__ = ["AbiExtractor", "Config", "main"]
