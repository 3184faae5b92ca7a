"""Canonical Pydantic models for the intermediate representation.

This is the single source of truth for data shapes produced by the
normalizer. Raw Swagger input stays a plain ``dict`` tree; everything the
engine emits is one of the models below:

**Type descriptors**:
    :class:`PrimitiveType`, :class:`ParameterLocation`, :class:`DataType`.

**Structure** -- what the code generator renders:
    :class:`Property`, :class:`Interface`, :class:`Module`,
    :class:`BaseClass`, and the root :class:`StandardDataSource`.

All models are frozen: once the normalizer hands a
:class:`StandardDataSource` over, it is never mutated. Passes that need to
change a model (such as the reference validator) build a copy with
``model_copy(update=...)``.
"""

from __future__ import annotations

import enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field


class PrimitiveType(str, enum.Enum):
    """Primitive shapes a :class:`DataType` can take.

    ``EMPTY`` is the void shape: used when a value is described purely by a
    reference, or when the source schema carries no type at all.
    """

    EMPTY = ""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FILE = "File"
    OBJECT = "object"
    ANY = "any"


class ParameterLocation(str, enum.Enum):
    """Locations where a Swagger 2.0 parameter can appear, per the ``in`` field."""

    QUERY = "query"
    PATH = "path"
    BODY = "body"
    HEADER = "header"
    FORM_DATA = "formData"


class DataType(BaseModel):
    """The resolved type of a property, parameter, or response.

    Exactly one of ``primitive_type`` and ``reference`` describes the scalar
    shape; ``is_array`` wraps either in a sequence. A non-empty
    ``reference`` always comes with an empty ``primitive_type``.
    """

    model_config = ConfigDict(frozen=True)

    is_array: bool = False
    primitive_type: PrimitiveType = PrimitiveType.EMPTY
    reference: str = Field(
        default="", description="Qualified type name, e.g. 'defs.api.Pet' or 'T0'"
    )
    enum: Optional[list[Union[str, bool, int, float]]] = None


class Property(BaseModel):
    """A field of a base class, or a parameter of an interface.

    ``location`` is only set when the property represents an operation
    parameter.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    required: bool = False
    data_type: DataType = Field(default_factory=DataType)
    location: Optional[ParameterLocation] = None


class Interface(BaseModel):
    """A single API operation (one path + HTTP method pair).

    Parameter names are unique within an interface.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    method: str
    path: str
    consumes: list[str] = Field(default_factory=list)
    response: DataType = Field(default_factory=DataType)
    parameters: list[Property] = Field(default_factory=list)


class Module(BaseModel):
    """A group of interfaces sharing a tag.

    Interface names are unique within a module.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    interfaces: list[Interface] = Field(default_factory=list)


class BaseClass(BaseModel):
    """A named object shape extracted from a Swagger definition.

    ``name`` may carry a generic declaration such as ``Page<T0>``;
    :attr:`just_name` strips it so that different instantiations of the
    same generic type can be recognised as one base type.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    properties: list[Property] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def just_name(self) -> str:
        """The name with any ``<...>`` parameter list removed."""
        if "<" in self.name:
            return self.name[: self.name.index("<")]
        return self.name


class StandardDataSource(BaseModel):
    """Complete normalized representation of one Swagger document.

    Produced by :func:`~swagnorm.normalizer.transform_swagger_data` and
    consumed by a code generator. Base class ``just_name`` values are
    unique, and every remaining body parameter reference resolves to one
    of the base classes.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    mods: list[Module] = Field(default_factory=list)
    base_classes: list[BaseClass] = Field(default_factory=list)
