"""Enumerations for domain models."""

from enum import Enum


class DataSource(str, Enum):
    """Provenance of a resolved quote."""

    PRIMARY = "yahoo"
    SECONDARY = "alpha"
    FALLBACK = "fallback"
    UNAVAILABLE = "unavailable"


class CacheStatus(str, Enum):
    """Whether any quote in a response was served from cache."""

    FRESH = "fresh"
    CACHED = "cached"
