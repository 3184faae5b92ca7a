"""swagnorm -- Normalize Swagger 2.0 documents into a code-generation model.

This package converts a Swagger document (a plain ``dict`` loaded from JSON or
YAML) into a :class:`~swagnorm.models.StandardDataSource`: a language-agnostic
tree of *modules* (one per tag, each holding *interfaces*) and *base classes*
(one per definition) that a code generator can render into client code.

Typical workflow::

    from swagnorm import load_document, transform_swagger_data

    raw = load_document("swagger.json")
    data_source = transform_swagger_data(raw, origin_name="petstore")
    print(data_source.model_dump_json(indent=2))

Modules:
    models: Pydantic models for the intermediate representation.
    naming: Identifier, case, and path helpers used while normalizing.
    normalizer: The normalization engine (types, generics, modules, models).
    config: Pydantic configuration model and file loading.
    loader: Local JSON/YAML document loading.
    exceptions: Exception hierarchy.
"""

from swagnorm.loader import load_document
from swagnorm.normalizer import transform_swagger_data

__version__ = "0.1.0"

__all__ = ["load_document", "transform_swagger_data", "__version__"]
