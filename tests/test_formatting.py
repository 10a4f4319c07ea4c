"""Tests for result cell formatting."""

import pytest

from fieldstats.capabilities.query_runner import QueryCell
from fieldstats.core.formatting import format_cell, format_number, localize
from fieldstats.core.models import SimpleDatum


class TestFormatCell:
    def test_string_value(self):
        assert format_cell({"value": "Shipped"}) == SimpleDatum(v="Shipped")

    def test_numeric_value_sets_n(self):
        datum = format_cell({"value": 120})
        assert datum.v == "120"
        assert datum.n == 120
        assert datum.l is None

    def test_rendered_text_wins(self):
        datum = format_cell({"value": 1234.5, "rendered": "$1,234.50"})
        assert datum.v == "$1,234.50"
        assert datum.n == 1234.5

    def test_empty_rendered_falls_back_to_value(self):
        assert format_cell({"value": 7, "rendered": ""}).v == "7"

    def test_first_link(self):
        datum = format_cell(
            {
                "value": "Shipped",
                "links": [{"url": "/explore/orders?f=shipped"}, {"url": "/other"}],
            }
        )
        assert datum.l == "/explore/orders?f=shipped"

    def test_null_value(self):
        datum = format_cell({"value": None})
        assert datum == SimpleDatum(v="")

    def test_missing_value(self):
        assert format_cell({}) == SimpleDatum(v="")

    def test_bool_is_not_numeric(self):
        datum = format_cell({"value": True})
        assert datum.v == "true"
        assert datum.n is None

    def test_numeric_string_is_not_numeric(self):
        datum = format_cell({"value": "42"})
        assert datum.v == "42"
        assert datum.n is None

    def test_integral_float_text(self):
        datum = format_cell(QueryCell(value=12.0))
        assert datum.v == "12"
        assert datum.n == 12.0


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (165, "165"),
            (1234567, "1,234,567"),
            (-1234, "-1,234"),
            (20.0, "20"),
            (1234.5, "1,234.5"),
            (2.34567, "2.346"),
            (0.0001, "0"),
        ],
    )
    def test_thousands_separators(self, value, expected):
        assert format_number(value) == expected

    def test_localize_skips_falsy(self):
        assert localize(0) == ""
        assert localize(None) == ""
        assert localize(1000) == "1,000"
        assert localize(20.456789) == "20.457"
