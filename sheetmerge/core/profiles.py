from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigError


class MergeProfile(BaseModel):
    """Named set of merge options loaded from profiles.yaml.

    Attributes:
        name: Profile key.
        display_name: Human readable name.
        keep_headers: Copy row 1 of every non-template file as data.
        ignore_column_differences: Merge files whose column count differs from the template.
        add_file_names: Append a column holding each row's source path.
        source_column_label: Optional header written above the source path column.
        report_dir: Directory receiving the merge report, if any.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    display_name: str = ""
    keep_headers: bool = False
    ignore_column_differences: bool = False
    add_file_names: bool = False
    source_column_label: str | None = None
    report_dir: Path | None = None


def _project_root() -> Path:
    # In source layout, this file is under <root>/sheetmerge/core
    return Path(__file__).resolve().parents[2]


def _config_dir() -> Path:
    return _project_root() / "sheetmerge" / "config"


def default_profiles_path() -> Path:
    env = os.getenv("SHEETMERGE_PROFILES")
    if env:
        return Path(env).expanduser()
    return _config_dir() / "profiles.yaml"


def load_profiles(path: str | Path | None = None) -> dict[str, MergeProfile]:
    """Load profiles from config/profiles.yaml.

    Returns a dict of profile-key -> MergeProfile.
    """
    cfg_path = Path(path) if path else default_profiles_path()
    if not cfg_path.exists():
        raise ConfigError(f"profiles.yaml not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError("profiles.yaml must contain a mapping")
    profiles_raw = data.get("profiles") or {}
    if not isinstance(profiles_raw, dict) or not profiles_raw:
        raise ConfigError("No profiles defined in profiles.yaml")
    profiles: Dict[str, MergeProfile] = {}
    for key, p in profiles_raw.items():
        try:
            payload = dict(p or {})
            payload.setdefault("display_name", key)
            prof = MergeProfile(name=key, **payload)
        except (TypeError, ValueError, ValidationError) as e:
            raise ConfigError(f"Invalid profile {key}: {e}") from e
        profiles[key] = prof
    return profiles


def get_profile(name: str, path: str | Path | None = None) -> MergeProfile:
    profiles = load_profiles(path)
    try:
        return profiles[name]
    except KeyError as exc:
        known = ", ".join(sorted(profiles))
        raise ConfigError(f"Unknown profile '{name}' (known: {known})") from exc
