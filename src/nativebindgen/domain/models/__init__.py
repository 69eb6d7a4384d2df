#!/usr/bin/env python3

"""Domain models for nativebindgen."""

from . import abi

__all__ = [
    "abi",
]
