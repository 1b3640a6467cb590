"""
Configuration loader with validation.

Builds ResolverConfig from environment variables (and a local .env file).
"""
from dataclasses import fields, replace

from dotenv import load_dotenv

from .config import ResolverConfig, ScoringConfig
from .config_validator import get_optional_env, parse_number_env, validate_config

ENV_PREFIX = "RESOLVER_"


def load_scoring_from_env() -> ScoringConfig:
    """
    Apply ``RESOLVER_<FIELD>`` overrides on top of the default scoring constants.

    Example: ``RESOLVER_MY_TEAM_BOOST=25`` raises the my-team boost to 25.
    """
    defaults = ScoringConfig()
    overrides = {}

    for f in fields(ScoringConfig):
        key = f"{ENV_PREFIX}{f.name.upper()}"
        raw = get_optional_env(key)
        if raw is None:
            continue
        kind = type(getattr(defaults, f.name))
        overrides[f.name] = parse_number_env(key, raw, kind)

    return replace(defaults, **overrides)


def load_config_from_env() -> ResolverConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = EntityResolverApp(config)
        app.initialize()

    :return: Validated ResolverConfig instance
    :raises: ConfigurationError if values are invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()

    config = ResolverConfig(
        catalog_path=get_optional_env(f"{ENV_PREFIX}CATALOG_PATH", check_placeholder=False),
        overlay_cache_path=get_optional_env(f"{ENV_PREFIX}OVERLAY_CACHE_PATH", check_placeholder=False),
        distance_backend=get_optional_env(f"{ENV_PREFIX}DISTANCE_BACKEND", default="builtin").lower(),
        log_level=get_optional_env(f"{ENV_PREFIX}LOG_LEVEL", default="INFO").upper(),
        scoring=load_scoring_from_env(),
    )

    return validate_config(config)
