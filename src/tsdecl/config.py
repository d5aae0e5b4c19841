"""Configuration and environment loading for tsdecl."""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models import GeneratorConfig


def load_env() -> bool:
    """Load environment variables from .env file.

    Returns:
        True if .env file was found and loaded, False otherwise.
    """
    # Try repo root first (relative to this file)
    repo_root = Path(__file__).parent.parent.parent
    env_file = repo_root / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        return True

    # Try current directory
    if Path(".env").exists():
        load_dotenv()
        return True

    return False


# Environment variables read at startup
ENV_BASEDIR = "TSDECL_BASEDIR"
ENV_SCOPE_REGISTRY = "TSDECL_SCOPE_REGISTRY"
ENV_OPTIONAL_DEPENDENCIES = "TSDECL_OPTIONAL_DEPENDENCIES"
ENV_CLASS_BLACKLIST = "TSDECL_CLASS_BLACKLIST"
ENV_DIAGNOSTICS_LOG = "TSDECL_DIAGNOSTICS_LOG"

# Override documents live next to the module sources as <type>.override.json
OVERRIDE_SUFFIX = ".override.json"


def _json_list(env: dict, key: str) -> list:
    raw = env.get(key, "[]") or "[]"
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"{key} is not valid JSON: {e}") from e
    if not isinstance(value, list):
        raise ValueError(f"{key} must be a JSON array")
    return value


def load_generator_config(env: Optional[dict] = None) -> GeneratorConfig:
    """Build the generator configuration from the environment.

    Args:
        env: Mapping to read from. Defaults to os.environ (after loading .env).

    Returns:
        Parsed GeneratorConfig.

    Raises:
        ValueError: If a variable holds malformed JSON or invalid entries.
    """
    if env is None:
        load_env()
        env = dict(os.environ)

    base_dir = env.get(ENV_BASEDIR)

    return GeneratorConfig(
        base_dir=Path(base_dir) if base_dir else Path.cwd(),
        scope_registry=_json_list(env, ENV_SCOPE_REGISTRY),
        optional_dependencies=_json_list(env, ENV_OPTIONAL_DEPENDENCIES),
        class_blacklist=_json_list(env, ENV_CLASS_BLACKLIST),
        diagnostics_log=env.get(ENV_DIAGNOSTICS_LOG, "").lower() in ("1", "true", "yes"),
    )
