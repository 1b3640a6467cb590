"""
Configuration validation utilities.

Environment parsing helpers and consistency checks for ResolverConfig.
"""
import os
import warnings
from typing import Optional

from .config import DISTANCE_BACKENDS, ResolverConfig, ScoringConfig
from .exceptions import ConfigurationError


def get_optional_env(
    key: str,
    default: Optional[str] = None,
    check_placeholder: bool = True,
) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :param check_placeholder: Treat values like "your_..." as unset. Off for
        filesystem paths, where such words are legitimate.
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and check_placeholder and _is_placeholder(value):
        warnings.warn(
            f"{key} appears to be a placeholder. Using default.",
            UserWarning
        )
        return default

    if value is not None and not value.strip():
        return default

    return value


def parse_number_env(key: str, raw: str, kind: type):
    """
    Convert an environment override to the type of the field it overrides.

    :param key: Environment variable name (for error messages)
    :param raw: Raw string value
    :param kind: ``int`` or ``float``
    :raises: ConfigurationError if the value is not numeric
    """
    try:
        return kind(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"{key} must be a {kind.__name__}, got {raw!r}."
        )


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file/directory path.

    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")

    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the file exists."
        )

    return path


def validate_scoring(scoring: ScoringConfig) -> ScoringConfig:
    """
    Check that scoring constants are mutually consistent.

    :raises: ConfigurationError on the first inconsistency found
    """
    if not 0.0 <= scoring.alternative_min_confidence <= 1.0:
        raise ConfigurationError(
            "alternative_min_confidence must be between 0.0 and 1.0, "
            f"got {scoring.alternative_min_confidence}"
        )

    if scoring.near_distance_km >= scoring.regional_distance_km:
        raise ConfigurationError(
            f"near_distance_km ({scoring.near_distance_km}) must be smaller than "
            f"regional_distance_km ({scoring.regional_distance_km})"
        )

    if scoring.max_alternatives < 0:
        raise ConfigurationError("max_alternatives cannot be negative")

    if scoring.max_window_size < 1:
        raise ConfigurationError("max_window_size must be at least 1")

    if scoring.fuzzy_short_word_max_distance < 1 or scoring.fuzzy_long_word_max_distance < 1:
        raise ConfigurationError("fuzzy word distance ceilings must be at least 1")

    return scoring


def validate_config(config: ResolverConfig) -> ResolverConfig:
    """
    Validate a complete resolver configuration.

    :param config: Configuration to validate
    :return: The same configuration
    :raises: ConfigurationError if invalid
    """
    if config.distance_backend not in DISTANCE_BACKENDS:
        raise ConfigurationError(
            f"Unknown distance backend '{config.distance_backend}'. "
            f"Must be one of: {list(DISTANCE_BACKENDS)}"
        )

    if config.catalog_path:
        validate_path(config.catalog_path, "RESOLVER_CATALOG_PATH", must_exist=True)

    validate_scoring(config.scoring)
    return config


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    placeholder_patterns = [
        "your_",
        "placeholder",
        "replace",
        "TODO",
    ]

    value_lower = value.lower()
    return any(pattern.lower() in value_lower for pattern in placeholder_patterns)
