"""Runtime configuration for itemx, resolved from the environment and CLI flags."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

FORMATTERS = ("rustfmt", "verbatim")
EDITIONS = ("2015", "2018", "2021", "2024")

_ENV_FORMATTER = "ITEMX_FORMATTER"
_ENV_RUSTFMT = "ITEMX_RUSTFMT"
_ENV_EDITION = "ITEMX_EDITION"
_ENV_NO_COLOR = "NO_COLOR"


class ConfigError(RuntimeError):
    """Raised when a configuration value is not usable."""


@dataclass
class ExtractorConfig:
    """Settings that influence parsing, formatting and output."""

    formatter: str = "rustfmt"
    rustfmt_path: str = "rustfmt"
    edition: str = "2021"
    color: Optional[bool] = None


def load_config(
    environ: Mapping[str, str] | None = None, **overrides: Any
) -> ExtractorConfig:
    """Build the configuration from environment variables, then apply overrides.

    Overrides whose value is ``None`` are ignored so unset CLI flags fall back
    to the environment or the defaults.
    """
    env = os.environ if environ is None else environ
    config = ExtractorConfig()

    formatter = _as_str(env.get(_ENV_FORMATTER))
    if formatter:
        config.formatter = formatter
    rustfmt_path = _as_str(env.get(_ENV_RUSTFMT))
    if rustfmt_path:
        config.rustfmt_path = rustfmt_path
    edition = _as_str(env.get(_ENV_EDITION))
    if edition:
        config.edition = edition
    # https://no-color.org: any non-empty value disables colour.
    if _as_str(env.get(_ENV_NO_COLOR)):
        config.color = False

    for key, value in overrides.items():
        if not hasattr(config, key):
            raise ConfigError(f"Unknown configuration option '{key}'")
        if value is None:
            continue
        setattr(config, key, value)

    config.formatter = _normalise_formatter(config.formatter)
    config.edition = _normalise_edition(config.edition)
    config.color = _as_bool(config.color)
    return config


def _normalise_formatter(value: Any) -> str:
    name = (_as_str(value) or "").strip().lower()
    if name not in FORMATTERS:
        choices = ", ".join(FORMATTERS)
        raise ConfigError(f"Unknown formatter '{value}' (expected one of {choices})")
    return name


def _normalise_edition(value: Any) -> str:
    edition = (_as_str(value) or "").strip()
    if edition not in EDITIONS:
        choices = ", ".join(EDITIONS)
        raise ConfigError(f"Unsupported Rust edition '{value}' (expected one of {choices})")
    return edition


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    raise ConfigError(f"Expected a boolean value, got '{value}'")


__all__ = ["ConfigError", "EDITIONS", "ExtractorConfig", "FORMATTERS", "load_config"]
