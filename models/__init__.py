"""Pydantic models for pagekv scan bounds and page layouts."""

from models.layout import (
    DEFAULT_HEADER_SIZE,
    DEFAULT_KEY_SIZE,
    MAX_ORDER,
    MAX_PAGE_SIZE,
    EfficiencyReport,
    PageCapacity,
    PageLayout,
)
from models.range import Range

__all__ = [
    "Range",
    "PageLayout",
    "PageCapacity",
    "EfficiencyReport",
    "MAX_ORDER",
    "MAX_PAGE_SIZE",
    "DEFAULT_HEADER_SIZE",
    "DEFAULT_KEY_SIZE",
]
