"""Loading of module drawing configuration files.

Reads a JSON document, validates it against
:class:`~modulecad.application.config.schema.DrawingConfiguration` and
reports every failure as a :class:`ConfigError` whose ``error_type``
tells the caller what went wrong:

- ``file_not_found``: the path does not exist
- ``permission_denied``: the file exists but cannot be read
- ``file_read_error``: any other OS-level read failure
- ``json_parse``: the file is not valid JSON
- ``validation``: the JSON does not match the schema
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from modulecad.application.config.schema import DrawingConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (see module docstring)
        path: Path to the configuration file, when loaded from disk
        details: Per-field validation errors or JSON line/column info
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("module", "widthMm"))
        'module.widthMm'
        >>> _format_json_path(("module", "sections", 0, "shelfCount"))
        'module.sections[0].shelfCount'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _validation_error(
    error: PydanticValidationError, path: Path | None = None
) -> ConfigError:
    details = [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]

    lines = ["Configuration validation failed:"]
    for detail in details:
        if detail["value"] is not None and not isinstance(detail["value"], dict):
            lines.append(
                f"  - {detail['path']}: {detail['message']} (got: {detail['value']!r})"
            )
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")

    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def load_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> DrawingConfiguration:
    """Validate a drawing configuration given as a dictionary.

    Args:
        data: Parsed configuration data
        path: Originating file, used only in error reports

    Returns:
        A validated DrawingConfiguration instance

    Raises:
        ConfigError: With ``error_type="validation"`` if the data does not
            match the schema.
    """
    try:
        return DrawingConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path) from e


def load_config(path: Path) -> DrawingConfiguration:
    """Load and validate a drawing configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated DrawingConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> try:
        ...     config = load_config(Path("wardrobe.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"{detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Config file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
            details=[{"path": "", "message": "expected an object"}],
        )

    logger.debug(f"Loaded config file {path}")
    return load_config_from_dict(data, path)
