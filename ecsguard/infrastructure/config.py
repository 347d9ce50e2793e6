"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to all ecsguard settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import dataclasses
import json
import logging
import os

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CredentialsConfig:
    """Accounts the credentials validator resolves against."""
    accounts: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValidationConfig:
    """Validation engine settings."""
    error_key: str = "createServerGroupDescription"


@dataclass(frozen=True)
class EcsGuardConfig:
    """Root configuration for ecsguard."""
    credentials: CredentialsConfig = field(default_factory=CredentialsConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    log_level: str = "WARNING"
    log_json: bool = False


_ROOT_FIELDS = {"log_level", "log_json"}


def _env_override(data: dict, prefix: str = "ECSGUARD") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern ECSGUARD_SECTION_KEY, or
    ECSGUARD_KEY for root settings. For example:
    ECSGUARD_CREDENTIALS_ACCOUNTS=prod,test, ECSGUARD_LOG_LEVEL=DEBUG
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        if name in _ROOT_FIELDS:
            data[name] = value
            continue
        parts = name.split("_", 1)
        if len(parts) == 2:
            section, field_name = parts
            if not isinstance(data.get(section), dict):
                data[section] = {}
            data[section][field_name] = value
        else:
            data[parts[0]] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s must contain a JSON object", path)
        return {}
    return data


def _to_bool(value) -> bool:
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return bool(value)


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}

    # Convert comma-separated strings to tuples for tuple fields
    for f in dataclasses.fields(cls):
        if f.name in filtered and f.type == "tuple[str, ...]":
            val = filtered[f.name]
            if isinstance(val, str):
                filtered[f.name] = tuple(v.strip() for v in val.split(",") if v.strip())
            elif isinstance(val, list):
                filtered[f.name] = tuple(val)

        if f.name in filtered and isinstance(filtered[f.name], str):
            if f.type == "int":
                filtered[f.name] = int(filtered[f.name])
            elif f.type == "bool":
                filtered[f.name] = _to_bool(filtered[f.name])

    return cls(**filtered)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "ECSGUARD",
) -> EcsGuardConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (ECSGUARD_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to ecsguard.json in CWD.
        env_prefix: Environment variable prefix. Defaults to ECSGUARD.
    """
    config_path = Path(path) if path else Path("ecsguard.json")
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    return EcsGuardConfig(
        credentials=_build_sub_config(CredentialsConfig, data.get("credentials", {})),
        validation=_build_sub_config(ValidationConfig, data.get("validation", {})),
        log_level=str(data.get("log_level", "WARNING")),
        log_json=_to_bool(data.get("log_json", False)),
    )
