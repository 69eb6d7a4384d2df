#!/usr/bin/env python3

"""Domain layer containing extraction logic and models."""

from . import models, services

__all__ = [
    "models",
    "services",
]
