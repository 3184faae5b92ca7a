"""Normalize raw Swagger operations into :class:`~swagnorm.models.Interface` models.

:func:`flatten_operations` walks the document's ``paths`` object and pairs
every operation with its owning path and method; :func:`normalize_operation`
then turns one such :class:`FlatOperation` into an interface: a name, the
resolved ``200`` response type, and the deduplicated parameter list.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from swagnorm.models import Interface, ParameterLocation, Property
from swagnorm.naming import get_identifier_from_operation_id, get_identifier_from_url
from swagnorm.normalizer.types import swagger_schema_to_data_type

logger = logging.getLogger(__name__)

# HTTP methods recognized in a Swagger path item, in canonical order
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


class FlatOperation(NamedTuple):
    """A raw operation together with the path and method it was declared under."""

    path: str
    method: str
    operation: dict[str, Any]


def flatten_operations(paths: dict[str, Any]) -> list[FlatOperation]:
    """Pair every operation in a Swagger ``paths`` object with its path and method.

    Path-level keys that are not HTTP methods (``parameters``, vendor
    extensions) are skipped. Document order is preserved.

    Args:
        paths: The raw ``paths`` mapping (path -> method -> operation).

    Returns:
        One :class:`FlatOperation` per path + method pair.
    """
    operations: list[FlatOperation] = []

    for path, path_item in (paths or {}).items():
        if not isinstance(path_item, dict):
            continue

        for method, operation in path_item.items():
            if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
                continue
            operations.append(FlatOperation(path, method.lower(), operation))

    return operations


def normalize_operation(
    flat: FlatOperation,
    using_operation_id: bool = True,
    same_path: str = "",
    origin_name: str = "",
) -> Interface:
    """Convert one raw operation into an :class:`~swagnorm.models.Interface`.

    The interface name comes from ``operationId`` when *using_operation_id* is
    set and the operation has one; otherwise it is derived from the method
    and path, with the module's common prefix *same_path* removed.

    Parameters are deduplicated by name, keeping the first occurrence, since
    some backends emit the same parameter twice.

    Args:
        flat: The operation with its path and method.
        using_operation_id: Name interfaces after their ``operationId``.
        same_path: Common path prefix of the owning module (no leading ``/``).
        origin_name: Namespace of the document being processed.

    Returns:
        The normalized interface.
    """
    operation = flat.operation
    operation_id = operation.get("operationId")

    if using_operation_id and operation_id:
        name = get_identifier_from_operation_id(operation_id)
    else:
        name = get_identifier_from_url(flat.path, flat.method, same_path)

    response = swagger_schema_to_data_type(
        _response_schema(operation), "", origin_name, is_response=True
    )

    return Interface(
        name=name,
        description=operation.get("summary") or "",
        method=flat.method,
        path=flat.path,
        consumes=operation.get("consumes") or [],
        response=response,
        parameters=_extract_parameters(operation.get("parameters") or [], origin_name),
    )


def _response_schema(operation: dict[str, Any]) -> dict[str, Any]:
    """Return the schema of the ``200`` response, or an empty schema.

    YAML documents may key responses by the integer ``200``.
    """
    responses = operation.get("responses") or {}
    success = responses.get("200") or responses.get(200) or {}
    return success.get("schema") or {}


def _extract_parameters(
    params_list: list[dict[str, Any]], origin_name: str
) -> list[Property]:
    """Convert raw parameter dicts into properties, first occurrence of a name wins.

    The parameter's own ``type``/``items``/``enum`` are merged with its body
    ``schema`` so that both ``$ref`` bodies and array bodies resolve.
    Parameters with unrecognised ``in`` locations are skipped.
    """
    parameters: list[Property] = []
    seen: set[str] = set()

    for param in params_list:
        name = param.get("name", "")
        location_str = param.get("in", "query")

        try:
            location = ParameterLocation(location_str)
        except ValueError:
            logger.debug("Skipping parameter '%s' with unknown location '%s'", name, location_str)
            continue

        if name in seen:
            logger.debug("Dropping duplicate parameter '%s'", name)
            continue
        seen.add(name)

        schema = param.get("schema") or {}
        resolvable = {
            "type": param.get("type") or schema.get("type"),
            "items": param.get("items") or schema.get("items"),
            "$ref": schema.get("$ref"),
            "enum": param.get("enum") or schema.get("enum"),
        }

        parameters.append(
            Property(
                name=name,
                description=param.get("description") or "",
                required=bool(param.get("required", False)),
                data_type=swagger_schema_to_data_type(
                    resolvable,
                    "",
                    origin_name,
                    is_response=location == ParameterLocation.BODY,
                ),
                location=location,
            )
        )

    return parameters
