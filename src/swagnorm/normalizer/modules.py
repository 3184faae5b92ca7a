"""Group normalized interfaces into modules, one per Swagger tag.

Tags in the wild are inconsistent: some documents repeat the name as the
description (meaning "no real tag"), operations refer to a tag by its name,
its lower-cased name or a variant of its description, and some documents
swap ``name`` and ``description`` entirely, putting a CJK label in ``name``.
These rules live in :class:`TagPolicy`, a small decision table that can be
tuned per document dialect; :func:`group_modules` applies it.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field

from swagnorm.models import Interface, Module
from swagnorm.naming import (
    find_common_prefix,
    has_non_latin_script,
    to_dash_case,
    to_dash_default_case,
    transform_camel_case,
)
from swagnorm.normalizer.operations import FlatOperation, normalize_operation

logger = logging.getLogger(__name__)


class TagPolicy(BaseModel):
    """Decision table for turning Swagger tags into modules.

    Each rule can be switched off independently when a document dialect does
    not need it.

    Example::

        policy = TagPolicy(swap_non_latin_names=False)
        modules = group_modules(operations, tags, policy=policy)
    """

    skip_placeholder_tags: bool = Field(
        default=True,
        description="Drop tags whose dash-cased name equals their dash-cased description",
    )
    controller_suffix: str = Field(
        default="-controller",
        description="Suffix ignored when comparing tag name and description",
    )
    match_name: bool = Field(default=True, description="Match operations on the tag name")
    match_lower_name: bool = Field(
        default=True, description="Match operations on the lower-cased tag name"
    )
    match_lower_description: bool = Field(
        default=True, description="Match operations on the lower-cased description"
    )
    match_dash_description: bool = Field(
        default=True, description="Match operations on the dash-cased description"
    )
    swap_non_latin_names: bool = Field(
        default=True,
        description="Use the description as module name when the tag name is non-Latin",
    )

    def is_placeholder(self, tag: dict[str, Any]) -> bool:
        """Return ``True`` if *tag* carries no information beyond its name."""
        if not self.skip_placeholder_tags:
            return False
        name, description = _tag_fields(tag)
        return to_dash_default_case(name, self.controller_suffix) == to_dash_default_case(
            description, self.controller_suffix
        )

    def match_keys(self, tag: dict[str, Any]) -> set[str]:
        """Return the operation tag values that select *tag*."""
        name, description = _tag_fields(tag)
        keys: set[str] = set()
        if self.match_name:
            keys.add(name)
        if self.match_lower_name:
            keys.add(name.lower())
        if self.match_lower_description and description:
            keys.add(description.lower())
        if self.match_dash_description and description:
            keys.add(to_dash_case(description))
        return keys

    def identify(self, tag: dict[str, Any]) -> tuple[str, str]:
        """Return the ``(module_name, module_description)`` for *tag*."""
        name, description = _tag_fields(tag)
        if self.swap_non_latin_names and description and has_non_latin_script(name):
            return transform_camel_case(description), name
        return transform_camel_case(name), description


def group_modules(
    operations: list[FlatOperation],
    tags: list[dict[str, Any]],
    using_operation_id: bool = True,
    origin_name: str = "",
    policy: Optional[TagPolicy] = None,
) -> list[Module]:
    """Partition operations into modules by tag.

    For every tag the policy keeps, the operations carrying one of its match
    keys are normalized against their common path prefix, deduplicated by
    interface name (first wins), and wrapped in a :class:`~swagnorm.models.Module`.
    Modules without interfaces are dropped.

    Args:
        operations: Every operation in the document, see
            :func:`~swagnorm.normalizer.operations.flatten_operations`.
        tags: The document's raw ``tags`` list.
        using_operation_id: Name interfaces after their ``operationId``.
        origin_name: Namespace of the document being processed.
        policy: Tag rules; defaults to :class:`TagPolicy` with every rule on.

    Returns:
        The non-empty modules, in tag order.
    """
    if policy is None:
        policy = TagPolicy()

    modules: list[Module] = []

    for tag in tags or []:
        if policy.is_placeholder(tag):
            logger.debug("Skipping placeholder tag '%s'", tag.get("name"))
            continue

        keys = policy.match_keys(tag)
        selected = [
            flat for flat in operations if keys.intersection(flat.operation.get("tags") or [])
        ]
        same_path = find_common_prefix([_strip_leading_slash(flat.path) for flat in selected])

        interfaces = _unique_by_name(
            normalize_operation(flat, using_operation_id, same_path, origin_name)
            for flat in selected
        )

        name, description = policy.identify(tag)
        if not interfaces:
            logger.debug("Dropping module '%s' without interfaces", name)
            continue

        modules.append(Module(name=name, description=description, interfaces=interfaces))

    return modules


def _unique_by_name(interfaces: Iterable[Interface]) -> list[Interface]:
    result: list[Interface] = []
    seen: set[str] = set()
    for interface in interfaces:
        if interface.name in seen:
            logger.debug("Dropping duplicate interface '%s'", interface.name)
            continue
        seen.add(interface.name)
        result.append(interface)
    return result


def _tag_fields(tag: dict[str, Any]) -> tuple[str, str]:
    return tag.get("name") or "", tag.get("description") or ""


def _strip_leading_slash(path: str) -> str:
    if path.startswith("/"):
        return path[1:]
    return path
