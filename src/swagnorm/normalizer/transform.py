"""Run the full normalization pipeline over one Swagger document.

:func:`transform_swagger_data` is the pure core entry point. The thin
wrappers :func:`normalize_document` and :func:`normalize_file` feed it from a
:class:`~swagnorm.config.NormalizerConfig` and a local file respectively.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from swagnorm.config import NormalizerConfig
from swagnorm.loader import load_document
from swagnorm.models import StandardDataSource
from swagnorm.normalizer.definitions import extract_base_classes
from swagnorm.normalizer.modules import TagPolicy, group_modules
from swagnorm.normalizer.operations import flatten_operations
from swagnorm.normalizer.references import validate_references

logger = logging.getLogger(__name__)


def transform_swagger_data(
    swagger: dict[str, Any],
    using_operation_id: bool = True,
    origin_name: str = "",
    tag_policy: Optional[TagPolicy] = None,
) -> StandardDataSource:
    """Normalize a raw Swagger document into a :class:`~swagnorm.models.StandardDataSource`.

    Base classes are extracted, sorted and deduplicated first; modules are
    grouped from the tagged operations; finally body parameters referring to
    models that do not exist among the base classes are dropped.

    The input dict is not modified. This function never raises for
    inconsistent documents.

    Args:
        swagger: The raw document (``paths``, ``tags``, ``definitions``).
        using_operation_id: Name interfaces after their ``operationId``
            instead of deriving names from method and URL.
        origin_name: Namespace label for this document, used to qualify
            references when several documents are merged.
        tag_policy: Tag handling rules, see
            :class:`~swagnorm.normalizer.modules.TagPolicy`.

    Returns:
        The normalized data source.

    Example::

        raw = load_document("swagger.json")
        data_source = transform_swagger_data(raw, origin_name="petstore")
        for mod in data_source.mods:
            print(mod.name, [i.name for i in mod.interfaces])
    """
    base_classes = extract_base_classes(swagger.get("definitions") or {}, origin_name)

    modules = group_modules(
        flatten_operations(swagger.get("paths") or {}),
        swagger.get("tags") or [],
        using_operation_id,
        origin_name,
        tag_policy,
    )
    modules = validate_references(modules, base_classes, origin_name)

    logger.info(
        "Normalized %d modules and %d base classes", len(modules), len(base_classes)
    )

    return StandardDataSource(
        name=swagger.get("name") or origin_name,
        mods=modules,
        base_classes=base_classes,
    )


def normalize_document(
    swagger: dict[str, Any], config: Optional[NormalizerConfig] = None
) -> StandardDataSource:
    """Run :func:`transform_swagger_data` with settings from *config*."""
    if config is None:
        config = NormalizerConfig()
    return transform_swagger_data(
        swagger,
        using_operation_id=config.using_operation_id,
        origin_name=config.origin_name,
        tag_policy=config.tag_policy,
    )


def normalize_file(
    path: Union[str, Path], config: Optional[NormalizerConfig] = None
) -> StandardDataSource:
    """Load a local Swagger file and normalize it.

    Raises:
        SpecParseError: If the file cannot be read or parsed.
    """
    return normalize_document(load_document(path), config)
