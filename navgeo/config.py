#!/usr/bin/env python3

"""
Configuration for navgeo.

Formatting settings live in an immutable ``DmsConfig`` value that can be
passed to every formatting call. A process-wide default is bound once at
import (optionally from the environment) and can be replaced with
``set_default_config`` before any concurrent formatting starts.
"""

import os
import locale
import logging
from dataclasses import dataclass, replace
from typing import Optional

logger = logging.getLogger(__name__)

# U+202F 'narrow no-break space'
DEFAULT_DMS_SEPARATOR = '\u202f'

# Environment Configuration
DMS_SEPARATOR = os.getenv("NAVGEO_DMS_SEPARATOR", DEFAULT_DMS_SEPARATOR)


def _locale_separators():
    conv = locale.localeconv()
    thousands = conv.get('thousands_sep') or ','
    decimal = conv.get('decimal_point') or '.'
    return thousands, decimal


@dataclass(frozen=True)
class DmsConfig:
    """
    Settings used when formatting and converting degree/minute/second strings.

    Attributes:
        separator: Placed between degrees, minutes, seconds and compass letter
        thousands_separator: Locale thousands marker (canonical form is ',')
        decimal_separator: Locale decimal marker (canonical form is '.')
    """

    separator: str = DEFAULT_DMS_SEPARATOR
    thousands_separator: str = ','
    decimal_separator: str = '.'

    @classmethod
    def from_locale(cls, separator: Optional[str] = None) -> 'DmsConfig':
        """Build a config whose locale markers come from the current C library locale."""
        thousands, decimal = _locale_separators()
        return cls(
            separator=DMS_SEPARATOR if separator is None else separator,
            thousands_separator=thousands,
            decimal_separator=decimal,
        )

    def with_separator(self, separator: str) -> 'DmsConfig':
        """Copy of this config using another DMS separator."""
        return replace(self, separator=separator)


_default_config = DmsConfig.from_locale()


def get_default_config() -> DmsConfig:
    """Return the process-wide formatting config."""
    return _default_config


def set_default_config(config: DmsConfig) -> None:
    """
    Replace the process-wide formatting config.

    Readers are not synchronized; set this once at startup if formatting
    happens from several threads.
    """
    global _default_config
    if not isinstance(config, DmsConfig):
        raise TypeError(f"expected DmsConfig, got {type(config).__name__}")
    logger.debug(f"DMS config set to separator={config.separator!r}")
    _default_config = config


def resolve_config(config: Optional[DmsConfig]) -> DmsConfig:
    return _default_config if config is None else config
