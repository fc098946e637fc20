"""Configuration loading for latency analysis."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

import yaml


# ---------------------------------------------------------------------------
# Input schema
# ---------------------------------------------------------------------------

DEFAULT_COLUMNS = ["timestamp", "elapsedtime_seconds", "trace_id", "jaeger_url"]


@dataclass
class SchemaConfig:
    """Expected CSV header.

    Columns are always addressed by position; names are only compared
    when *verify_header* is set.
    """
    columns: list = field(default_factory=lambda: list(DEFAULT_COLUMNS))
    verify_header: bool = False
    delimiter: str = ","


# ---------------------------------------------------------------------------
# Report config
# ---------------------------------------------------------------------------

@dataclass
class ReportConfig:
    # whole-number percentiles shown by the "all" analysis
    default_percentiles: list = field(default_factory=lambda: [50, 99])


# ---------------------------------------------------------------------------
# Output config
# ---------------------------------------------------------------------------

@dataclass
class OutputConfig:
    directory: str = "latency_reports"
    formats: list = field(default_factory=lambda: ["text"])


# ---------------------------------------------------------------------------
# Top-level Config
# ---------------------------------------------------------------------------

@dataclass
class AnalyzerConfig:
    version: str = "1.0"
    schema: SchemaConfig = field(default_factory=SchemaConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def _apply_dict(obj, data: dict):
    """Apply dictionary values to a dataclass instance, recursively."""
    if not isinstance(data, dict):
        return
    for key, value in data.items():
        if hasattr(obj, key):
            current = getattr(obj, key)
            if hasattr(current, '__dataclass_fields__') and isinstance(value, dict):
                _apply_dict(current, value)
            else:
                setattr(obj, key, value)


def load_config(config_path: Optional[str] = None, base_dir: Optional[str] = None) -> AnalyzerConfig:
    """Load analyzer configuration from a YAML file.

    Search order when *config_path* is None:
      1. ``opstats.yaml`` in *base_dir*
      2. ``.opstats/opstats.yaml`` in *base_dir*

    *base_dir* defaults to cwd. Without any file the defaults apply.
    """
    if base_dir is None:
        base_dir = os.getcwd()

    config = AnalyzerConfig()

    if config_path is None:
        candidates = [
            os.path.join(base_dir, "opstats.yaml"),
            os.path.join(base_dir, ".opstats", "opstats.yaml"),
        ]
        for candidate in candidates:
            if os.path.isfile(candidate):
                config_path = candidate
                break

    if config_path and os.path.isfile(config_path):
        with open(config_path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if "version" in data:
            config.version = str(data["version"])
        if "schema" in data:
            _apply_dict(config.schema, data["schema"])
        if "report" in data:
            _apply_dict(config.report, data["report"])
        if "output" in data:
            _apply_dict(config.output, data["output"])

        # Relative output directories follow the config file
        if not os.path.isabs(config.output.directory):
            config_dir = os.path.dirname(os.path.abspath(config_path))
            config.output.directory = os.path.normpath(
                os.path.join(config_dir, config.output.directory)
            )

    return config
