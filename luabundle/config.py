# ==========================================
# CONFIGURATION
# ==========================================
import json
import os
from enum import Enum
from typing import List

from pydantic import BaseModel, ValidationError, field_validator

from luabundle.errors import ConfigError
from luabundle.log import debug_log

CONFIG_FILE = "luabundle.json"
USER_CONFIG_FILE = os.path.join("~", ".luabundle", "config.json")


class DedupKey(str, Enum):
    """Which Module field decides that two discovered requires are the same module."""
    REFERENCE = "reference"
    PATH = "path"


class CyclePolicy(str, Enum):
    """What discovery does when a file requires one of its own ancestors."""
    ERROR = "error"
    SKIP = "skip"


class BundleConfig(BaseModel):
    """Bundling policies. Defaults reproduce the plain require semantics."""
    extensions: List[str] = [".lua", ".luau"]
    dedup_key: DedupKey = DedupKey.REFERENCE
    cycle_policy: CyclePolicy = CyclePolicy.ERROR
    memoize: bool = False
    strict_discovery: bool = False

    @field_validator("extensions")
    @classmethod
    def _check_extensions(cls, value):
        if not value:
            raise ValueError("at least one extension is required")
        # ".lua" and "lua" both mean the same suffix
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]


def load_bundle_config(base_dir=None):
    """
    Load bundler configuration for a project.

    Looks for luabundle.json in base_dir, then ~/.luabundle/config.json.
    The first file found wins; defaults are used when neither exists.

    Raises:
        ConfigError: If the file found is not valid JSON or not a valid config
    """
    paths = [
        os.path.join(base_dir or ".", CONFIG_FILE),
        os.path.expanduser(USER_CONFIG_FILE),
    ]
    for p in paths:
        if not os.path.isfile(p):
            continue
        debug_log(f"Loading config from {p}")
        try:
            with open(p, "r", encoding="utf-8") as f:
                data = json.load(f)
            return BundleConfig.model_validate(data)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON: {e}", path=p) from e
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration: {e.error_count()} error(s)",
                path=p,
                context=str(e).split("\n")[1] if "\n" in str(e) else None,
                suggestion="Check the field names and values against BundleConfig",
            ) from e
    return BundleConfig()
