#!/usr/bin/env python3

"""Domain services layer."""

from . import parsing

__all__ = [
    "parsing",
]
