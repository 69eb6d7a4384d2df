#!/usr/bin/env python3

"""Infrastructure layer for technical concerns."""

from . import clang_frontend, config, logging

__all__ = [
    "clang_frontend",
    "config",
    "logging",
]
