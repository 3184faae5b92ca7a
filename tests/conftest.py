"""Shared test fixtures for swagnorm.

Provides the raw Swagger fixture document and the data source normalized
from it. These fixtures are automatically discovered by pytest and available
to all test modules without explicit imports.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from swagnorm.models import StandardDataSource


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Raw document fixtures (plain dicts loaded from JSON files)
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_raw() -> dict[str, Any]:
    """Load the raw petstore Swagger 2.0 document."""
    with open(FIXTURES_DIR / "petstore_swagger.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def petstore_pristine(petstore_raw: dict[str, Any]) -> dict[str, Any]:
    """A deep copy of the raw document, for checking the input is never mutated."""
    return copy.deepcopy(petstore_raw)


# ---------------------------------------------------------------------------
# Normalized fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_source(petstore_raw: dict[str, Any]) -> StandardDataSource:
    """The petstore document normalized with default settings."""
    from swagnorm.normalizer import transform_swagger_data

    return transform_swagger_data(petstore_raw)


@pytest.fixture
def petstore_api_source(petstore_raw: dict[str, Any]) -> StandardDataSource:
    """The petstore document normalized under the ``api`` origin namespace."""
    from swagnorm.normalizer import transform_swagger_data

    return transform_swagger_data(petstore_raw, origin_name="api")
