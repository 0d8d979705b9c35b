"""
Configuration settings for TransitBuilder OSM ingestion
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import os

from dotenv import load_dotenv
from loguru import logger


@dataclass
class OverpassConfig:
    """Overpass API endpoints and request settings"""
    # Interchangeable interpreters, tried in order after failures
    endpoints: List[str] = field(default_factory=lambda: [
        "https://overpass-api.de/api/interpreter",
        "https://overpass.kumi.systems/api/interpreter",
        "https://maps.mail.ru/osm/tools/overpass/api/interpreter",
    ])

    # Client-side HTTP timeout (milliseconds)
    timeout_ms: int = 30000

    # Largest bbox accepted by load_area (square degrees); None disables the guard
    max_area_deg2: Optional[float] = 0.01

    # Server-side [timeout:N] written into the query (seconds)
    query_timeout_s: int = 25

    # Minimum spacing between requests from one client (seconds)
    min_request_interval_s: float = 1.0

    user_agent: str = "TransitBuilder/1.0"

    @property
    def timeout_s(self) -> float:
        return self.timeout_ms / 1000.0


@dataclass
class TransitConfig:
    """Top-level configuration"""
    overpass: OverpassConfig = field(default_factory=OverpassConfig)

    # Directory for raw Overpass responses; None disables the disk cache
    cache_dir: Optional[str] = None

    output_dir: str = "output"


# Global config instance
config = TransitConfig()

# camelCase option object accepted by config_from_options
_OPTION_KEYS = {
    "endpoints": "endpoints",
    "timeoutMs": "timeout_ms",
    "maxAreaDeg2": "max_area_deg2",
}


def _endpoint_list(value: Any) -> List[str]:
    if isinstance(value, str):
        raise TypeError("endpoints must be a list of URLs")
    return [str(v) for v in value]


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


_OPTION_TYPES = {
    "endpoints": _endpoint_list,
    "timeout_ms": int,
    "max_area_deg2": _optional_float,
}


def get_config() -> TransitConfig:
    """Get global configuration"""
    return config


def config_from_options(options: Dict[str, Any]) -> TransitConfig:
    """
    Build a configuration from an option object

    Recognized options: endpoints, timeoutMs, maxAreaDeg2.
    Unknown keys are ignored with a warning. Values are converted to the
    option's type; unconvertible values raise ValueError.
    """
    overpass = OverpassConfig()
    errors = []
    for key, value in options.items():
        attr = _OPTION_KEYS.get(key)
        if attr is None:
            logger.warning(f"Ignoring unknown config option: {key}")
            continue
        try:
            setattr(overpass, attr, _OPTION_TYPES[attr](value))
        except (TypeError, ValueError) as e:
            errors.append(f"{key}: cannot use {value!r} ({e})")

    if errors:
        raise ValueError("Invalid config options:\n" + "\n".join(f"  - {e}" for e in errors))

    result = TransitConfig(overpass=overpass)
    validate_config(result)
    return result


def load_env_config(env_file: Optional[str] = None) -> TransitConfig:
    """
    Build a configuration from environment variables (and a .env file if present)

    TRANSIT_OVERPASS_ENDPOINTS: comma-separated endpoint URLs
    TRANSIT_OVERPASS_TIMEOUT_MS: client timeout in milliseconds
    TRANSIT_MAX_AREA_DEG2: maximum bbox area, "none" disables the guard
    TRANSIT_CACHE_DIR: directory for raw response cache
    """
    if env_file:
        load_dotenv(env_file, override=False)
    else:
        env_path = Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=False)
            logger.debug(f"Loaded .env file from {env_path}")

    result = TransitConfig()

    endpoints = os.getenv("TRANSIT_OVERPASS_ENDPOINTS")
    if endpoints:
        result.overpass.endpoints = [e.strip() for e in endpoints.split(",") if e.strip()]

    timeout_ms = os.getenv("TRANSIT_OVERPASS_TIMEOUT_MS")
    if timeout_ms:
        result.overpass.timeout_ms = int(timeout_ms)

    max_area = os.getenv("TRANSIT_MAX_AREA_DEG2")
    if max_area:
        result.overpass.max_area_deg2 = None if max_area.lower() == "none" else float(max_area)

    cache_dir = os.getenv("TRANSIT_CACHE_DIR")
    if cache_dir:
        result.cache_dir = cache_dir

    validate_config(result)
    return result


def validate_config(config: TransitConfig) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.
    """
    errors = []

    if config.overpass is None:
        errors.append("overpass configuration is required but not set")
    else:
        if not config.overpass.endpoints:
            errors.append("overpass.endpoints must contain at least one URL")
        for endpoint in config.overpass.endpoints or []:
            if not isinstance(endpoint, str) or not endpoint.startswith(("http://", "https://")):
                errors.append(f"overpass.endpoints contains an invalid URL: {endpoint!r}")
        if not isinstance(config.overpass.timeout_ms, (int, float)) or config.overpass.timeout_ms <= 0:
            errors.append(f"overpass.timeout_ms must be positive, got {config.overpass.timeout_ms}")
        max_area = config.overpass.max_area_deg2
        if max_area is not None and (not isinstance(max_area, (int, float)) or max_area <= 0):
            errors.append(f"overpass.max_area_deg2 must be positive, got {config.overpass.max_area_deg2}")
        if config.overpass.query_timeout_s <= 0:
            errors.append(f"overpass.query_timeout_s must be positive, got {config.overpass.query_timeout_s}")
        if config.overpass.min_request_interval_s < 0:
            errors.append("overpass.min_request_interval_s must not be negative")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
