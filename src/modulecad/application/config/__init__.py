"""Configuration schema, loading and validation for module drawings.

Public API:
    - DrawingConfiguration: Root configuration model
    - ModuleConfigSchema: Module dimensions and structure model
    - SectionConfig: Section configuration model
    - PanelsEnabledConfig: Panel enable flags model
    - OriginConfig: Drawing origin model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_module: Convert the module block to a domain ModuleConfig
    - config_to_origin: Convert the origin block to a Point2D
    - validate_module_config: Check a ModuleConfig against product limits
    - sanitize_module_config: Clamp a ModuleConfig into product limits

Example:
    >>> from pathlib import Path
    >>> from modulecad.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("wardrobe.json"))
    ...     print(config.module.width_mm)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from modulecad.application.config.adapter import (
    config_to_module,
    config_to_origin,
    config_to_panels,
    config_to_section,
)
from modulecad.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from modulecad.application.config.schema import (
    SUPPORTED_VERSIONS,
    DrawingConfiguration,
    ModuleConfigSchema,
    OriginConfig,
    PanelsEnabledConfig,
    SectionConfig,
)
from modulecad.application.config.validator import (
    VALIDATION_LIMITS,
    ValidationError,
    ValidationLimits,
    ValidationResult,
    ValidationWarning,
    sanitize_module_config,
    validate_module_config,
)

__all__ = [
    # Schema models
    "DrawingConfiguration",
    "ModuleConfigSchema",
    "OriginConfig",
    "PanelsEnabledConfig",
    "SectionConfig",
    "SUPPORTED_VERSIONS",
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Adapter
    "config_to_module",
    "config_to_origin",
    "config_to_panels",
    "config_to_section",
    # Validation
    "VALIDATION_LIMITS",
    "ValidationError",
    "ValidationLimits",
    "ValidationResult",
    "ValidationWarning",
    "sanitize_module_config",
    "validate_module_config",
]
