import os
import yaml
from dataclasses import dataclass, fields, replace
from typing import Dict, Any, Optional

from web_json.utils.logger import get_logger

DEFAULT_CONFIG_PATH = "config/web_json.yaml"

ENV_OVERRIDES = {
    "content_type": "WEB_JSON_CONTENT_TYPE",
    "log_level": "WEB_JSON_LOG_LEVEL",
}


@dataclass(frozen=True)
class JsonHelperConfig:
    """Settings fixed when the JSON helpers are attached to an app."""

    content_type: str = "application/json"
    log_level: str = "INFO"


DEFAULT_CONFIG = JsonHelperConfig()


def load_config(
    config_path: str = DEFAULT_CONFIG_PATH, environ: Optional[Dict[str, str]] = None
) -> JsonHelperConfig:
    """Load configuration from file and environment or use defaults."""
    logger = get_logger()
    environ = os.environ if environ is None else environ

    config = DEFAULT_CONFIG
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                raw = yaml.safe_load(f) or {}
            config = _from_mapping(raw.get("web_json") or {})
            logger.info(f"Loaded configuration from {config_path}")
        except Exception as e:
            logger.error(f"Error loading configuration: {str(e)}")
            logger.info("Using default configuration")
            config = DEFAULT_CONFIG
    else:
        logger.debug(
            f"Configuration file {config_path} not found, using default configuration"
        )

    overrides = {
        name: environ[var] for name, var in ENV_OVERRIDES.items() if environ.get(var)
    }
    if overrides:
        logger.info(f"Applying environment overrides: {', '.join(sorted(overrides))}")
        config = replace(config, **overrides)

    return config


def _from_mapping(values: Dict[str, Any]) -> JsonHelperConfig:
    """Build a config from a mapping, ignoring unknown keys."""
    if not isinstance(values, dict):
        raise ValueError("'web_json' section must be a mapping")

    known = {f.name for f in fields(JsonHelperConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        get_logger().warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")

    return JsonHelperConfig(**{k: str(v) for k, v in values.items() if k in known})
