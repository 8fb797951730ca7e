"""Exceptions raised outside the pure analysis core."""

from __future__ import annotations


class FlipDealError(Exception):
    """Base exception for flip_deal errors."""


class ConfigError(FlipDealError):
    """Config file could not be parsed or is not a mapping."""


class PropertyInputError(FlipDealError):
    """Property input file could not be read or is not a mapping."""
