"""Metadata descriptor exports."""

from .models import Explore, ExploreField, ExploreFields, LookmlModel

__all__ = [
    "Explore",
    "ExploreField",
    "ExploreFields",
    "LookmlModel",
]
