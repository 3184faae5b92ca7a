"""Identifier, case, and path helpers used while normalizing a document.

These are the small, stateless string transformations the normalizer leans
on when it needs a name for something the Swagger document does not name
directly:

* :func:`get_identifier_from_operation_id` and
  :func:`get_identifier_from_url` -- derive an interface name.
* :func:`find_common_prefix` -- the shared leading path of a module's
  operations, stripped before deriving URL-based names.
* :func:`transform_camel_case`, :func:`to_dash_case`,
  :func:`to_dash_default_case` -- case conversions applied to tag names.
* :func:`has_non_latin_script` -- detects tag names written in CJK (or any
  other non-Latin) script.
"""

from __future__ import annotations

import re
import unicodedata

# springfox appends the HTTP verb to duplicate operation ids: ``listUsingGET``.
_OPERATION_ID_SUFFIX = re.compile(r"^(.+)(Using.+)$")
_DASH_WORD = re.compile(r"-+(\w)")
_UPPER = re.compile(r"[A-Z]")


def get_identifier_from_operation_id(operation_id: str) -> str:
    """Derive an interface name from a Swagger ``operationId``.

    Strips the ``Using<METHOD>`` suffix that springfox adds to operation ids.

    Example::

        >>> get_identifier_from_operation_id("listPetsUsingGET")
        'listPets'
        >>> get_identifier_from_operation_id("listPets")
        'listPets'
    """
    return _OPERATION_ID_SUFFIX.sub(r"\1", operation_id)


def get_identifier_from_url(url: str, method: str, same_path: str = "") -> str:
    """Derive an interface name from an HTTP method and URL path.

    The common module prefix *same_path* is removed first, then each remaining
    segment is appended in PascalCase. Path parameters become ``By<Name>``,
    dashed segments are camel-cased, and anything after a ``.`` (such as a
    ``.json`` suffix) is ignored.

    Args:
        url: The operation path, e.g. ``"/user/{user-id}/orders"``.
        method: The lower-case HTTP method, used as the leading verb.
        same_path: Common prefix (without leading ``/``) to strip.

    Returns:
        An identifier such as ``"getByUserIdOrders"``.

    Example::

        >>> get_identifier_from_url("/user/list", "get", "user")
        'getList'
        >>> get_identifier_from_url("/user/{id}", "delete", "user")
        'deleteById'
    """
    path = _strip_prefix(url, same_path).split(".", 1)[0]

    words: list[str] = []
    for segment in _split_segments(path):
        segment = _DASH_WORD.sub(lambda match: match.group(1).upper(), segment)
        if _is_path_param(segment):
            words.append("By" + to_upper_first_letter(segment[1:-1]))
        else:
            words.append(to_upper_first_letter(segment))

    return method + "".join(words)


def find_common_prefix(paths: list[str]) -> str:
    """Find the longest common leading path shared by all *paths*.

    Paths are given without their leading ``/``. Only whole segments are
    compared, and the last segment of a path is never part of the prefix, so
    every path keeps at least one segment after stripping.

    Args:
        paths: Paths such as ``["user/list", "user/detail"]``.

    Returns:
        The common prefix without leading or trailing ``/`` (``"user"`` for the
        example above), or ``""`` when there is none.

    Example::

        >>> find_common_prefix(["api/v1/users", "api/v1/tasks"])
        'api/v1'
        >>> find_common_prefix(["users", "users/{id}"])
        ''
    """
    if not paths:
        return ""

    split_paths = [path.split("/") for path in paths]
    prefix_segments: list[str] = []

    depth = 0
    while all(len(segs) > depth + 1 for segs in split_paths):
        heads = {segs[depth] for segs in split_paths}
        if len(heads) != 1:
            break
        prefix_segments.append(heads.pop())
        depth += 1

    return "/".join(prefix_segments)


def to_upper_first_letter(text: str) -> str:
    """Upper-case the first character of *text*, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def transform_camel_case(name: str) -> str:
    """Convert a dashed or space separated name to camelCase.

    Example::

        >>> transform_camel_case("pet-store")
        'petStore'
        >>> transform_camel_case("User Admin")
        'userAdmin'
        >>> transform_camel_case("User")
        'user'
    """
    if "-" in name:
        words = name.split("-")
    elif " " in name:
        words = name.split(" ")
    else:
        words = [name]

    result = "".join(to_upper_first_letter(word) for word in words if word)
    return result[:1].lower() + result[1:]


def to_dash_case(name: str) -> str:
    """Convert a PascalCase or camelCase name to dash-case.

    Spaces are removed before conversion.

    Example::

        >>> to_dash_case("UserController")
        'user-controller'
    """
    dashed = _UPPER.sub(lambda match: "-" + match.group(0).lower(), name.replace(" ", ""))
    if dashed.startswith("-"):
        return dashed[1:]
    return dashed


def to_dash_default_case(name: str, suffix: str = "-controller") -> str:
    """Dash-case *name* and drop a trailing *suffix* (``-controller`` by default).

    springfox generates tags named after controllers, e.g. ``user-controller``
    with the description ``User Controller``; this puts both on equal footing.
    """
    dashed = to_dash_case(name)
    if suffix and dashed.endswith(suffix):
        return dashed[: -len(suffix)]
    return dashed


def has_non_latin_script(text: str) -> bool:
    """Return ``True`` if *text* contains a letter from a non-Latin script.

    Used to spot tag names written in CJK (or Cyrillic, Greek, ...) where a
    Latin identifier was expected.
    """
    for char in text:
        if char.isalpha() and not unicodedata.name(char, "").startswith("LATIN"):
            return True
    return False


def _split_segments(path: str) -> list[str]:
    """Split a path into non-empty segments.

    ``"/api/v1/users"`` -> ``["api", "v1", "users"]``
    """
    return [s for s in path.split("/") if s]


def _is_path_param(segment: str) -> bool:
    """Return ``True`` if *segment* is a path parameter (e.g., ``{id}``)."""
    return segment.startswith("{") and segment.endswith("}")


def _strip_prefix(path: str, prefix: str) -> str:
    """Strip *prefix* segments from *path*.

    If *path* does not start with *prefix*, it is returned unchanged.
    """
    prefix_segments = _split_segments(prefix)
    if not prefix_segments:
        return path

    path_segments = _split_segments(path)
    if path_segments[: len(prefix_segments)] != prefix_segments:
        return path

    return "/" + "/".join(path_segments[len(prefix_segments) :])
