"""Allow-listed property registry: generation, loading, lookup."""

from cartool.registry.generator import ARTIFACT_FILENAME, build_registry, generate, parse_config
from cartool.registry.loader import clear_registry, get_registry, load_registry, set_registry
from cartool.registry.models import Property, PropertyDefinition, PropertyRegistry

__all__ = [
    "ARTIFACT_FILENAME",
    "Property",
    "PropertyDefinition",
    "PropertyRegistry",
    "build_registry",
    "clear_registry",
    "generate",
    "get_registry",
    "load_registry",
    "parse_config",
    "set_registry",
]
