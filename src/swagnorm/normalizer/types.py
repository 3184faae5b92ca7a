"""Map raw Swagger schemas onto :class:`~swagnorm.models.DataType`.

A schema node here is the small subset of a Swagger schema the normalizer
cares about: ``type``, ``items``, ``$ref`` and ``enum``. Resolution applies,
in order:

1. Primitive extraction -- ``array`` takes its primitive from ``items.type``
   (nested raw arrays are not supported and resolve to an empty primitive).
2. Primitive rewrites -- ``object`` -> empty, ``integer`` -> ``number``,
   ``file`` -> ``File``.
3. Reference resolution through
   :func:`~swagnorm.normalizer.generics.transform_template_name`.
4. Placeholder removal -- the bare ``Model`` placeholder is no reference.
5. Self-reference collapse -- a reference to the enclosing template argument
   becomes ``T0``.
6. Namespacing with ``defs.<origin>.`` (or ``defs.`` for responses).
7. Enum sanitising via :func:`~swagnorm.normalizer.enums.fix_enum`.
"""

from __future__ import annotations

import logging
from typing import Any

from swagnorm.models import DataType, PrimitiveType
from swagnorm.normalizer.enums import fix_enum
from swagnorm.normalizer.generics import (
    NAMESPACE_PREFIX,
    qualify_name,
    transform_template_name,
)

logger = logging.getLogger(__name__)

# Model name emitted by some generators when no concrete model exists.
PLACEHOLDER_MODEL = "Model"
SELF_REFERENCE = "T0"

_PRIMITIVE_REWRITES: dict[str, str] = {
    "object": PrimitiveType.EMPTY.value,
    "integer": PrimitiveType.NUMBER.value,
    "file": PrimitiveType.FILE.value,
}
_KNOWN_PRIMITIVES = frozenset(p.value for p in PrimitiveType)


def swagger_schema_to_data_type(
    schema: dict[str, Any],
    template_name: str = "",
    origin_name: str = "",
    is_response: bool = False,
) -> DataType:
    """Resolve a raw schema node into a :class:`~swagnorm.models.DataType`.

    Args:
        schema: A dict with any of the keys ``type``, ``items``, ``$ref``,
            ``enum``.
        template_name: The generic argument of the base class this schema
            belongs to (e.g. ``"User"`` for a property of ``Result«User»``).
            A reference to it collapses to ``T0``. Empty outside generic base
            classes.
        origin_name: Namespace of the document being processed.
        is_response: Whether this schema describes a response or a body
            parameter; such references are always ``defs.``-qualified.

    Returns:
        The resolved data type. A non-empty ``reference`` always comes with
        an empty ``primitive_type``.

    Example::

        >>> swagger_schema_to_data_type({"type": "integer"}).primitive_type
        <PrimitiveType.NUMBER: 'number'>
        >>> swagger_schema_to_data_type({"$ref": "#/definitions/Pet"}, "", "api").reference
        'defs.api.Pet'
    """
    raw_type = _type_name(schema)
    items = schema.get("items")
    if not isinstance(items, dict):
        items = {}
    is_array = raw_type == "array"

    primitive = raw_type
    if is_array:
        primitive = _type_name(items)
        if primitive == "array":
            primitive = ""

    primitive = _PRIMITIVE_REWRITES.get(primitive, primitive)

    raw_ref = schema.get("$ref") or items.get("$ref") or ""
    reference = transform_template_name(raw_ref, origin_name).use_name

    if reference == PLACEHOLDER_MODEL:
        reference = ""

    if reference and reference == template_name:
        reference = SELF_REFERENCE
    elif reference:
        if origin_name and origin_name not in reference:
            reference = qualify_name(reference, origin_name)
        elif is_response and not reference.startswith(NAMESPACE_PREFIX):
            reference = qualify_name(reference)

    if reference:
        primitive = ""
    elif primitive not in _KNOWN_PRIMITIVES:
        logger.debug("Unknown schema type '%s', resolving to 'any'", primitive)
        primitive = PrimitiveType.ANY.value

    return DataType(
        is_array=is_array,
        primitive_type=PrimitiveType(primitive),
        reference=reference,
        enum=fix_enum(schema.get("enum")),
    )


def _type_name(schema: dict[str, Any]) -> str:
    """Return the schema's ``type`` as a string, or ``""`` when absent or not a string."""
    type_value = schema.get("type")
    if isinstance(type_value, str):
        return type_value
    return ""
