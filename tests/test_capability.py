"""Tests for field capability classification."""

import pytest

from fieldstats.capabilities.metadata import Explore, ExploreField, ExploreFields
from fieldstats.core.capability import (
    available_kinds,
    can_compute_distribution,
    can_compute_top_values,
    companion_count_field,
    ensure_computable,
)
from fieldstats.core.errors import UnsupportedSummaryError
from fieldstats.core.models import SummaryKind


def _measure(name, view_label, label_short="Count"):
    return ExploreField(
        name=name,
        category="measure",
        type="count",
        view_label=view_label,
        label_short=label_short,
    )


@pytest.fixture
def region():
    return ExploreField(name="orders.region", category="dimension", view_label="Orders")


@pytest.fixture
def region_explore(region):
    return Explore(
        name="orders",
        fields=ExploreFields(
            dimensions=[region],
            measures=[
                _measure("orders.count", "Orders"),
                _measure("products.count", "Products"),
            ],
        ),
    )


class TestCompanionCountField:
    def test_matches_on_view_label(self, region, region_explore):
        found = companion_count_field(region_explore, region)
        assert found is not None
        assert found.name == "orders.count"
        assert can_compute_top_values(region, region_explore) is True

    def test_skips_counts_from_other_views(self, explore, status_field):
        # products.count is listed first but belongs to another view.
        assert companion_count_field(explore, status_field).name == "orders.count"

    def test_none_without_same_view_count(self, region_explore):
        users_city = ExploreField(
            name="users.city", category="dimension", view_label="Users"
        )
        assert companion_count_field(region_explore, users_city) is None
        assert can_compute_top_values(users_city, region_explore) is False

    def test_requires_count_label(self, region):
        explore = Explore(
            name="orders",
            fields=ExploreFields(measures=[_measure("orders.total", "Orders", "Total")]),
        )
        assert companion_count_field(explore, region) is None

    def test_custom_count_label(self, region):
        explore = Explore(
            name="orders",
            fields=ExploreFields(measures=[_measure("orders.rows", "Orders", "Rows")]),
        )
        found = companion_count_field(explore, region, count_label="Rows")
        assert found.name == "orders.rows"

    def test_first_match_wins(self, region):
        explore = Explore(
            name="orders",
            fields=ExploreFields(
                measures=[_measure("orders.count", "Orders"), _measure("orders.count_2", "Orders")]
            ),
        )
        assert companion_count_field(explore, region).name == "orders.count"


class TestPredicates:
    def test_measures_never_get_top_values(self, explore, count_field):
        assert can_compute_top_values(count_field, explore) is False

    def test_distribution_needs_numeric_dimension(self, price_field, status_field, count_field):
        assert can_compute_distribution(price_field) is True
        assert can_compute_distribution(status_field) is False
        numeric_measure = count_field.model_copy(update={"type": "number"})
        assert can_compute_distribution(numeric_measure) is False

    def test_available_kinds(self, explore, price_field, status_field, count_field):
        assert available_kinds(explore, price_field) == [
            SummaryKind.VALUES,
            SummaryKind.DISTRIBUTION,
        ]
        assert available_kinds(explore, status_field) == [SummaryKind.VALUES]
        assert available_kinds(explore, count_field) == []


class TestEnsureComputable:
    def test_accepts_supported_requests(self, make_request, price_field):
        ensure_computable(make_request(price_field, SummaryKind.VALUES))
        ensure_computable(make_request(price_field, SummaryKind.DISTRIBUTION))

    def test_rejects_values_for_measure(self, make_request, count_field):
        with pytest.raises(UnsupportedSummaryError, match="dimension"):
            ensure_computable(make_request(count_field, SummaryKind.VALUES))

    def test_rejects_values_without_count(self, make_request, status_field):
        bare = Explore(name="orders", fields=ExploreFields(dimensions=[status_field]))
        request = make_request(status_field, SummaryKind.VALUES, explore_override=bare)
        with pytest.raises(UnsupportedSummaryError, match="Count"):
            ensure_computable(request)

    def test_rejects_distribution_for_strings(self, make_request, status_field):
        with pytest.raises(UnsupportedSummaryError, match="numeric"):
            ensure_computable(make_request(status_field, SummaryKind.DISTRIBUTION))
