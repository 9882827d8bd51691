import copy
import logging
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union
from dotenv import load_dotenv
from errdigest.errors import ConfigError
from errdigest.utils.validators import validate_config


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "settings.yaml"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "ERRDIGEST_BASE_DIR": ("scan", "base_dir"),
    "ERRDIGEST_OUTPUT": ("output", "path"),
    "ERRDIGEST_EXTENSIONS": ("scan", "extensions"),
}


def _read_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot load config {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def normalize_extensions(extensions: Iterable[str]) -> List[str]:
    """Lower-case extensions and make sure each starts with a dot."""
    normalized = []
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        normalized.append(ext if ext.startswith(".") else f".{ext}")
    return normalized


def _apply_env_overrides(config: Dict[str, Any]) -> None:
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if not value:
            continue
        if key == "extensions":
            value = normalize_extensions(value.split(","))
        config.setdefault(section, {})[key] = value
        logger.debug(f"Config {section}.{key} overridden by {env_name}")


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load settings: packaged defaults, then ``config_path``, then env vars."""
    config = _read_yaml(DEFAULT_CONFIG_PATH)
    if config_path:
        config = _merge(config, _read_yaml(config_path))

    # Load environment variables
    load_dotenv()
    _apply_env_overrides(config)

    errors = validate_config(config)
    if errors:
        raise ConfigError(f"Invalid configuration: {'; '.join(errors)}")

    return config
