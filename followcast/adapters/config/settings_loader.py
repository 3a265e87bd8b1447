import os

import yaml

from followcast.core.domain.settings import ForecastSettings

# Environment variable -> (section, key); None section means top level
ENV_OVERRIDES = {
    "FOLLOWCAST_CSV_PATH": ("data", "csv_path"),
    "FOLLOWCAST_OUTPUT_PATH": ("plot", "output_path"),
    "FOLLOWCAST_LOG_LEVEL": (None, "log_level"),
}


def load_settings(path: str | None = None) -> ForecastSettings:
    """
    Load run settings from a YAML file.
    Falls back to defaults if the file doesn't exist or is not provided.

    Precedence: env vars > file > defaults.

    Args:
        path: Path to config.yaml. Defaults to FOLLOWCAST_CONFIG_FILE env var or "config.yaml".
    """
    if path is None:
        path = os.getenv("FOLLOWCAST_CONFIG_FILE", "config.yaml")

    config_data = {}

    if os.path.exists(path):
        try:
            with open(path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise RuntimeError(f"Failed to load configuration from {path}: {e}") from e

        if not isinstance(config_data, dict):
            raise RuntimeError(f"Configuration in {path} must be a mapping")

    for env_var, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if not value:
            continue
        if section is None:
            config_data[key] = value
        else:
            # An empty YAML section loads as None
            section_data = config_data.get(section) or {}
            section_data[key] = value
            config_data[section] = section_data

    return ForecastSettings(**config_data)
