"""Load Swagger documents from local JSON or YAML files.

This module handles the only I/O the normalizer needs: reading a raw
document from disk and converting it into a Python dictionary. Both JSON
and YAML are supported with automatic format detection.

The public functions are:

* :func:`load_document` -- Load and parse a document from a file path.
* :func:`swagger_version` -- Report the declared ``swagger`` version, if any.

After loading, the raw dict is passed to
:func:`~swagnorm.normalizer.transform_swagger_data`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from swagnorm.exceptions import SpecParseError


def load_document(path: Union[str, Path]) -> dict[str, Any]:
    """Load a Swagger document from a local file.

    Supports .json, .yaml, and .yml extensions. Falls back to content-based
    detection if the extension is not recognized.

    Args:
        path: Path to the local file.

    Returns:
        The parsed document dictionary.

    Raises:
        SpecParseError: If the file cannot be read or content cannot be parsed.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"Swagger file not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecParseError(f"Failed to read Swagger file {path}: {exc}") from exc

    if not content.strip():
        raise SpecParseError(f"Swagger file is empty: {path}")

    suffix = file_path.suffix.lower()
    hint = ""
    if suffix == ".json":
        hint = "json"
    elif suffix in (".yaml", ".yml"):
        hint = "yaml"

    return parse_content(content, hint=hint)


def parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse content as JSON or YAML.

    Tries JSON first (unless hint is 'yaml'), then falls back to YAML.
    Valid JSON is also valid YAML, but JSON parsing is stricter and faster.

    Args:
        content: The raw string content.
        hint: Optional format hint ('json' or 'yaml').

    Returns:
        The parsed dictionary.

    Raises:
        SpecParseError: If the content cannot be parsed as either format, or
            does not hold a mapping.
    """
    json_error: Optional[Exception] = None

    if hint != "yaml":
        try:
            result = json.loads(content)
        except json.JSONDecodeError as exc:
            json_error = exc
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc
        else:
            return _ensure_mapping(result)

    try:
        result = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        msg = "Failed to parse document as JSON or YAML"
        if json_error:
            msg += f"\n  JSON error: {json_error}"
        msg += f"\n  YAML error: {exc}"
        raise SpecParseError(msg) from exc

    return _ensure_mapping(result)


def swagger_version(document: dict[str, Any]) -> Optional[str]:
    """Return the document's ``swagger`` version string, or ``None``.

    Purely informational: the normalizer accepts whatever shape it is given.
    """
    version = document.get("swagger")
    if version is None:
        return None
    return str(version)


def _ensure_mapping(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        kind = type(result).__name__ if result is not None else "empty document"
        raise SpecParseError(f"Swagger document must be a JSON/YAML object (got {kind})")
    return result
