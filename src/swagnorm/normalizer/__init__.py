"""Normalization engine -- turn a raw Swagger dict into the intermediate model.

Typical usage::

    from swagnorm.normalizer import transform_swagger_data

    data_source = transform_swagger_data(raw, using_operation_id=True, origin_name="api")

Sub-modules:

* :mod:`~swagnorm.normalizer.enums` -- Enum value sanitising.
* :mod:`~swagnorm.normalizer.generics` -- Generic-name (``Foo«Bar»``) parsing.
* :mod:`~swagnorm.normalizer.types` -- Schema to :class:`~swagnorm.models.DataType`
  resolution.
* :mod:`~swagnorm.normalizer.operations` -- Operation flattening and
  normalization into interfaces.
* :mod:`~swagnorm.normalizer.modules` -- Tag policy and module grouping.
* :mod:`~swagnorm.normalizer.definitions` -- Base class extraction.
* :mod:`~swagnorm.normalizer.references` -- Dangling body reference pruning.
* :mod:`~swagnorm.normalizer.transform` -- The pipeline entry points.
"""

from swagnorm.normalizer.modules import TagPolicy
from swagnorm.normalizer.transform import (
    normalize_document,
    normalize_file,
    transform_swagger_data,
)

__all__ = ["TagPolicy", "transform_swagger_data", "normalize_document", "normalize_file"]
