"""Exporter configuration and option constructors."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Optional

from stdoutlog.errors import ConfigError


@dataclass(frozen=True)
class ExporterConfig:
    writer: Any
    pretty_print: bool = False
    timestamps: bool = True


Option = Callable[[ExporterConfig], ExporterConfig]


def with_writer(writer: Any) -> Option:
    """Send output to ``writer`` instead of the default sink."""

    def apply(config: ExporterConfig) -> ExporterConfig:
        return replace(config, writer=writer)

    return apply


def with_pretty_print() -> Option:
    """Emit tab-indented, multi-line JSON."""

    def apply(config: ExporterConfig) -> ExporterConfig:
        return replace(config, pretty_print=True)

    return apply


def without_timestamps() -> Option:
    """Zero both timestamp fields of every record before encoding."""

    def apply(config: ExporterConfig) -> ExporterConfig:
        return replace(config, timestamps=False)

    return apply


def build_config(options: Iterable[Option] = (), default_writer: Any = None) -> ExporterConfig:
    """
    Apply ``options`` in order to the default configuration.

    Args:
        options: Option callables, applied first to last
        default_writer: Sink used when no option sets one (defaults to the
            current ``sys.stdout``)

    Returns:
        The resulting immutable ExporterConfig

    Raises:
        ConfigError: If an option is malformed or the writer cannot be written to
    """
    config = ExporterConfig(writer=default_writer if default_writer is not None else sys.stdout)
    for option in options:
        if not callable(option):
            raise ConfigError("exporter option is not callable", {"option": repr(option)})
        config = option(config)
        if not isinstance(config, ExporterConfig):
            raise ConfigError("exporter option did not return an ExporterConfig", {"option": repr(option)})
    if not callable(getattr(config.writer, "write", None)):
        raise ConfigError("writer has no write method", {"writer": type(config.writer).__name__})
    return config
