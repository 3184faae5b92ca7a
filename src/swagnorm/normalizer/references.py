"""Drop body parameters that reference undeclared models.

Documents regularly reference models that were never declared (or were
filtered out). Generating code against such a body type would fail, so
:func:`validate_references` removes the offending parameter instead.
"""

from __future__ import annotations

import logging

from swagnorm.models import BaseClass, Interface, Module, ParameterLocation, Property
from swagnorm.normalizer.generics import NAMESPACE_PREFIX

logger = logging.getLogger(__name__)


def validate_references(
    modules: list[Module], base_classes: list[BaseClass], origin_name: str = ""
) -> list[Module]:
    """Return *modules* with dangling body parameters removed.

    A ``body`` parameter is kept when its reference, stripped of the leading
    ``defs.`` (and ``<origin_name>.``) qualifier, equals the ``name`` or
    ``just_name`` of one of *base_classes*. Body parameters without a
    reference and parameters in other locations are always kept.

    Args:
        modules: Modules produced by
            :func:`~swagnorm.normalizer.modules.group_modules`.
        base_classes: The final, deduplicated base classes.
        origin_name: Namespace of the document being processed.

    Returns:
        New module models; the inputs are not modified.
    """
    known = {base.name for base in base_classes} | {base.just_name for base in base_classes}

    return [
        module.model_copy(
            update={
                "interfaces": [
                    _validate_interface(interface, known, origin_name)
                    for interface in module.interfaces
                ]
            }
        )
        for module in modules
    ]


def unqualified_reference(reference: str, origin_name: str = "") -> str:
    """Strip the ``defs.`` namespace (and ``<origin_name>.``) from *reference*.

    Example::

        >>> unqualified_reference("defs.api.Pet", "api")
        'Pet'
        >>> unqualified_reference("defs.Pet")
        'Pet'
    """
    if reference.startswith(NAMESPACE_PREFIX):
        reference = reference[len(NAMESPACE_PREFIX) :]
        origin_prefix = f"{origin_name}."
        if origin_name and reference.startswith(origin_prefix):
            reference = reference[len(origin_prefix) :]
    return reference


def _validate_interface(interface: Interface, known: set[str], origin_name: str) -> Interface:
    parameters = [
        param for param in interface.parameters if _is_resolvable(param, known, origin_name)
    ]
    if len(parameters) == len(interface.parameters):
        return interface
    return interface.model_copy(update={"parameters": parameters})


def _is_resolvable(param: Property, known: set[str], origin_name: str) -> bool:
    if param.location != ParameterLocation.BODY or not param.data_type.reference:
        return True

    ref = unqualified_reference(param.data_type.reference, origin_name)
    if ref in known:
        return True

    logger.debug(
        "Dropping body parameter '%s' of '%s': model '%s' is not declared",
        param.name,
        param.data_type.reference,
        ref,
    )
    return False
