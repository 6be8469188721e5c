from pydantic import BaseModel, validator
from pathlib import Path
import yaml
import os

from .errors import ConfigError

DATA_DIR = str(Path(__file__).parent / "data")


class SkyCultureConfig(BaseModel):
    name: str = "western"
    asset_root: str = DATA_DIR
    max_lines: int = 64  # stick-figure segments per constellation
    max_edges: int = 64  # boundary edges per constellation

    @validator('name')
    def validate_name(cls, v):
        if not v or "/" in v or v.strip() != v:
            raise ValueError(f"Invalid sky culture name: {v!r}")
        return v

    @validator('max_lines', 'max_edges')
    def validate_capacity(cls, v):
        if v < 1 or v > 4096:
            raise ValueError("Capacity must be between 1 and 4096")
        return v


class IdentifiersConfig(BaseModel):
    registry_file: str = os.path.join(DATA_DIR, "identifiers.yaml")


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_format: bool = True

    @validator('level')
    def validate_level(cls, v):
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if v.upper() not in allowed:
            raise ValueError(f"Invalid log level: {v}. Must be one of {allowed}")
        return v.upper()


class AppConfig(BaseModel):
    skyculture: SkyCultureConfig = SkyCultureConfig()
    identifiers: IdentifiersConfig = IdentifiersConfig()
    logging: LoggingConfig = LoggingConfig()

    class Config:
        extra = "forbid"  # Prevent unexpected config keys


def load_config(path: str = "config.yaml") -> AppConfig:
    """Load configuration from YAML file with environment variable overrides."""
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"Warning: Config file {path} not found, using defaults")
        data = {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}")

    env_overrides = {}

    # Sky culture overrides
    if "SKYCULTURE_NAME" in os.environ:
        env_overrides.setdefault("skyculture", {})["name"] = os.environ["SKYCULTURE_NAME"]
    if "SKYCULTURE_ASSET_ROOT" in os.environ:
        env_overrides.setdefault("skyculture", {})["asset_root"] = os.environ["SKYCULTURE_ASSET_ROOT"]

    # Identifier registry overrides
    if "IDENTIFIERS_FILE" in os.environ:
        env_overrides.setdefault("identifiers", {})["registry_file"] = os.environ["IDENTIFIERS_FILE"]

    # Logging overrides
    if "LOG_LEVEL" in os.environ:
        env_overrides.setdefault("logging", {})["level"] = os.environ["LOG_LEVEL"]
    if "LOG_JSON" in os.environ:
        env_overrides.setdefault("logging", {})["json_format"] = os.environ["LOG_JSON"].lower() == "true"

    def merge_dict(base, override):
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                merge_dict(base[key], value)
            else:
                base[key] = value

    merge_dict(data, env_overrides)

    try:
        return AppConfig(**data)
    except Exception as e:
        raise ConfigError(f"Configuration validation failed: {e}")


def print_config(config: AppConfig) -> None:
    """Print effective configuration on startup."""
    print("=== Sky Culture Catalog Configuration ===")
    print(f"Sky Culture: {config.skyculture.name}")
    print(f"Asset Root: {config.skyculture.asset_root}")
    print(f"Max Lines / Constellation: {config.skyculture.max_lines}")
    print(f"Max Edges / Constellation: {config.skyculture.max_edges}")
    print(f"Identifiers Registry: {config.identifiers.registry_file}")
    print(f"Log Level: {config.logging.level} ({'json' if config.logging.json_format else 'text'})")
    print("=" * 41)
