"""
Pytest configuration and shared fixtures for the fieldstats test suite.
"""

import os

import pytest

from fieldstats.capabilities.metadata import (
    Explore,
    ExploreField,
    ExploreFields,
    LookmlModel,
)
from fieldstats.core.models import SummaryRequest

# Configure pytest-asyncio
pytest_plugins = ["pytest_asyncio"]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "looker: marks tests requiring a live Looker instance"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically skip live tests if Looker credentials are missing."""
    for item in items:
        if "looker" in item.keywords:
            if not (
                os.getenv("LOOKERSDK_BASE_URL")
                and os.getenv("LOOKERSDK_CLIENT_ID")
                and os.getenv("LOOKERSDK_CLIENT_SECRET")
            ):
                item.add_marker(
                    pytest.mark.skip(
                        reason="LOOKERSDK_BASE_URL/CLIENT_ID/CLIENT_SECRET not set"
                    )
                )


@pytest.fixture
def model():
    return LookmlModel(name="ecommerce")


@pytest.fixture
def status_field():
    return ExploreField(
        name="orders.status",
        category="dimension",
        type="string",
        view_label="Orders",
        label_short="Status",
    )


@pytest.fixture
def price_field():
    return ExploreField(
        name="orders.price",
        category="dimension",
        type="number",
        view_label="Orders",
        label_short="Price",
    )


@pytest.fixture
def count_field():
    return ExploreField(
        name="orders.count",
        category="measure",
        type="count",
        view_label="Orders",
        label_short="Count",
    )


@pytest.fixture
def explore(status_field, price_field, count_field):
    product_count = ExploreField(
        name="products.count",
        category="measure",
        type="count",
        view_label="Products",
        label_short="Count",
    )
    return Explore(
        name="orders",
        model_name="ecommerce",
        fields=ExploreFields(
            dimensions=[status_field, price_field],
            measures=[product_count, count_field],
        ),
    )


@pytest.fixture
def make_request(model, explore):
    def _make(field, kind, *, explore_override=None):
        return SummaryRequest(
            model=model,
            explore=explore_override or explore,
            field=field,
            kind=kind,
        )

    return _make


@pytest.fixture
def values_response():
    return {
        "data": [
            {"orders.status": {"value": "Shipped"}, "orders.count": {"value": 120}},
            {"orders.status": {"value": "Pending"}, "orders.count": {"value": 45}},
        ],
        "totals_data": {"orders.count": {"value": 165}},
    }


@pytest.fixture
def stats_response():
    return {
        "data": [
            {
                "min": {"value": 10},
                "max": {"value": 30},
                "average": {"value": 20},
            }
        ]
    }

