class EntityResolverError(Exception):
    """Base exception for entity resolver service."""


class ConfigurationError(EntityResolverError):
    """Raised when configuration is missing or invalid."""


class CatalogLoadError(EntityResolverError):
    """Raised when the entity catalog cannot be read."""


class ServiceNotInitializedError(EntityResolverError):
    """Raised when the resolver is used before initialization."""
