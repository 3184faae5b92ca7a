"""Parse generic-type notation embedded in Swagger definition names.

springfox-style documents encode Java generics in definition names with
guillemets: ``Result«Page«User»»``, ``Map«string,List«Order»»``. This module
turns such a name into two forms:

* the **use name** -- a fully resolved type expression that other types can
  reference, e.g. ``defs.api.Result<defs.api.Page<defs.api.User>>``;
* the **declaration name** -- the shape of the generic declaration with
  positional parameters, e.g. ``Result<T0>``.

Parsing is a small recursive descent: :func:`split_template_name` peels off
the outer name and the bracketed payload, :func:`split_arguments` splits the
payload on top-level commas only, and nested arguments are resolved by
calling :func:`transform_template_name` again. Malformed notation never
raises; the name is then treated as a plain, non-generic name.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from swagnorm.models import PrimitiveType

OPEN_MARKER = "«"
CLOSE_MARKER = "»"

DEFINITIONS_PREFIX = "#/definitions/"
NAMESPACE_PREFIX = "defs."

# Java collection alias rewritten to the canonical sequence type.
LIST_ALIAS = "List"
SEQUENCE_TYPE = "Array"

_PRIMITIVE_NAMES = frozenset(
    {PrimitiveType.STRING.value, PrimitiveType.NUMBER.value, PrimitiveType.BOOLEAN.value}
)
_PASSTHROUGH_NAMES = frozenset({"object", "any"})


class GenericName(NamedTuple):
    """Result of :func:`transform_template_name`."""

    use_name: str
    declaration_name: str


def transform_template_name(template_name: str, origin_name: str = "") -> GenericName:
    """Resolve a definition or ``$ref`` name into its use and declaration forms.

    Args:
        template_name: A definition name such as ``Page«User»`` or a reference
            such as ``#/definitions/Page«User»``.
        origin_name: Namespace of the document being processed. Type names
            inside a generic expression are qualified as
            ``defs.<origin_name>.<Name>``, or ``defs.<Name>`` when empty.

    Returns:
        A :class:`GenericName`. Plain names come back unchanged (apart from the
        ``#/definitions/`` prefix) in both fields.

    Example::

        >>> transform_template_name("Foo«Bar»", "api")
        GenericName(use_name='defs.api.Foo<defs.api.Bar>', declaration_name='Foo<T0>')
        >>> transform_template_name("#/definitions/List«Bar»", "api").use_name
        'Array<defs.api.Bar>'
    """
    ref_name = strip_definitions_prefix(template_name)

    parts = split_template_name(ref_name)
    if parts is None:
        return GenericName(ref_name, ref_name)

    outer, payload = parts
    arguments = split_arguments(payload) or []

    declaration_name = declaration_form(outer, len(arguments))

    if outer == LIST_ALIAS:
        use_outer = SEQUENCE_TYPE
    elif outer.startswith(NAMESPACE_PREFIX):
        use_outer = outer
    else:
        use_outer = qualify_name(outer, origin_name)

    use_arguments = [_resolve_argument(argument, origin_name) for argument in arguments]
    use_name = f"{use_outer}<{','.join(use_arguments)}>"

    return GenericName(use_name, declaration_name)


def strip_definitions_prefix(name: str) -> str:
    """Remove a leading ``#/definitions/`` from a ``$ref`` string."""
    if name.startswith(DEFINITIONS_PREFIX):
        return name[len(DEFINITIONS_PREFIX) :]
    return name


def split_template_name(name: str) -> Optional[tuple[str, str]]:
    """Split ``Outer«payload»`` into ``("Outer", "payload")``.

    Returns ``None`` when *name* is not a well-formed generic name: no opening
    marker, an empty outer name, text after the closing marker, an empty
    payload, or unbalanced markers.
    """
    open_at = name.find(OPEN_MARKER)
    if open_at <= 0 or not name.endswith(CLOSE_MARKER):
        return None

    outer = name[:open_at]
    payload = name[open_at + 1 : -1]
    if split_arguments(payload) is None:
        return None

    return outer, payload


def split_arguments(payload: str) -> Optional[list[str]]:
    """Split a generic payload on commas that are not inside nested markers.

    ``"string,List«A,B»"`` splits into ``["string", "List«A,B»"]``.

    Returns:
        The stripped arguments, or ``None`` if the markers are unbalanced or
        an argument is empty.
    """
    arguments: list[str] = []
    depth = 0
    start = 0

    for index, char in enumerate(payload):
        if char == OPEN_MARKER:
            depth += 1
        elif char == CLOSE_MARKER:
            depth -= 1
            if depth < 0:
                return None
        elif char == "," and depth == 0:
            arguments.append(payload[start:index].strip())
            start = index + 1

    if depth != 0:
        return None

    arguments.append(payload[start:].strip())
    if not all(arguments):
        return None

    return arguments


def declaration_form(outer: str, arity: int) -> str:
    """Build ``Outer<T0,...,Tn>`` for a generic with *arity* parameters."""
    placeholders = ",".join(f"T{index}" for index in range(arity))
    return f"{outer}<{placeholders}>"


def qualify_name(name: str, origin_name: str = "") -> str:
    """Prefix *name* with ``defs.<origin_name>.`` (or ``defs.``)."""
    if origin_name:
        return f"{NAMESPACE_PREFIX}{origin_name}.{name}"
    return f"{NAMESPACE_PREFIX}{name}"


def _resolve_argument(argument: str, origin_name: str) -> str:
    if argument == "long":
        return PrimitiveType.NUMBER.value
    if split_template_name(argument) is not None:
        return transform_template_name(argument, origin_name).use_name
    if (
        argument in _PRIMITIVE_NAMES
        or argument in _PASSTHROUGH_NAMES
        or argument.startswith(NAMESPACE_PREFIX)
    ):
        return argument
    return qualify_name(argument, origin_name)
