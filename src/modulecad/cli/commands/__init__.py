"""CLI command implementations for the modulecad application.

- validate: Validate a configuration file
"""

from modulecad.cli.commands.validate import (
    display_load_error,
    display_validation_result,
    validate_command,
)

__all__ = ["display_load_error", "display_validation_result", "validate_command"]
