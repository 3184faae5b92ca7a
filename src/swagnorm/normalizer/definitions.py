"""Extract :class:`~swagnorm.models.BaseClass` models from Swagger definitions.

Each entry of the document's ``definitions`` mapping becomes one base class.
Generic definition names (``Result«User»``) are rewritten to their
declaration form (``Result<T0>``) and properties referring back to the
generic argument collapse to ``T0``.

Several instantiations of the same generic (``Result«User»``,
``Result«List«Order»»``) all declare ``Result<T0>``; only one survives
:func:`sort_and_dedupe`.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from swagnorm.models import BaseClass, Property
from swagnorm.normalizer.generics import (
    LIST_ALIAS,
    split_template_name,
    transform_template_name,
)
from swagnorm.normalizer.types import swagger_schema_to_data_type

logger = logging.getLogger(__name__)


def extract_base_classes(
    definitions: dict[str, Any], origin_name: str = ""
) -> list[BaseClass]:
    """Convert every raw definition into a base class, sorted and deduplicated.

    Args:
        definitions: The document's raw ``definitions`` mapping
            (name -> schema with ``description``, ``required``, ``properties``).
        origin_name: Namespace of the document being processed.

    Returns:
        Base classes with unique ``just_name``, see :func:`sort_and_dedupe`.
    """
    base_classes = [
        _extract_base_class(def_name, definition or {}, origin_name)
        for def_name, definition in (definitions or {}).items()
    ]
    return sort_and_dedupe(base_classes)


def template_argument(def_name: str) -> str:
    """Return the generic argument a definition's properties may refer back to.

    ``Result«User»`` yields ``User``; a ``List«...»`` payload is unwrapped once
    more, so ``Page«List«User»»`` also yields ``User``. Non-generic names
    yield ``""``.
    """
    parts = split_template_name(def_name)
    if parts is None:
        return ""

    _, payload = parts
    inner = split_template_name(payload)
    if inner is not None and inner[0] == LIST_ALIAS:
        return inner[1]
    return payload


def sort_and_dedupe(base_classes: list[BaseClass]) -> list[BaseClass]:
    """Sort by ``just_name`` descending, longer name first, then dedupe by ``just_name``.

    The first (most specific) instantiation of each base type is kept.
    """
    ordered = sorted(
        base_classes, key=lambda base: (base.just_name, len(base.name)), reverse=True
    )

    result: list[BaseClass] = []
    seen: set[str] = set()
    for base in ordered:
        if base.just_name in seen:
            logger.debug("Dropping duplicate base class '%s'", base.name)
            continue
        seen.add(base.just_name)
        result.append(base)
    return result


def _extract_base_class(
    def_name: str, definition: dict[str, Any], origin_name: str
) -> BaseClass:
    template_name = template_argument(def_name)
    required_fields = definition.get("required") or []

    properties = [
        Property(
            name=prop_name,
            description=prop.get("description") or "",
            required=_is_required(prop, prop_name, required_fields),
            data_type=swagger_schema_to_data_type(prop, template_name, origin_name),
        )
        for prop_name, prop in (definition.get("properties") or {}).items()
    ]

    return BaseClass(
        name=transform_template_name(def_name, origin_name).declaration_name,
        description=definition.get("description") or "",
        properties=properties,
    )


def _is_required(prop: dict[str, Any], prop_name: str, required_fields: list[str]) -> bool:
    """A property's own boolean ``required`` flag wins over the definition's list."""
    flag: Optional[Any] = prop.get("required")
    if isinstance(flag, bool):
        return flag
    return prop_name in required_fields
