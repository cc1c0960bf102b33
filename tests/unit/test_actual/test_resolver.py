#!/usr/bin/env python3
"""Tests for the name resolver."""

import pytest

from actual_export.actual.models import ActualCategory, ActualPayee
from actual_export.actual.resolver import NameResolver, build_category_map, build_payee_map


@pytest.mark.actual
class TestNameResolver:
    """Test id → entity lookups."""

    def test_known_ids_resolve_to_entities(self, resolver):
        assert resolver.category_for("c1") == ActualCategory(id="c1", name="Salary", is_income=True)
        assert resolver.payee_for("p1").name == "Employer"

    def test_unknown_ids_resolve_to_none(self, resolver):
        assert resolver.category_for("nope") is None
        assert resolver.payee_for("nope") is None

    @pytest.mark.parametrize("missing", [None, ""])
    def test_empty_ids_resolve_to_none(self, resolver, missing):
        assert resolver.category_for(missing) is None
        assert resolver.payee_for(missing) is None

    def test_empty_resolver(self):
        resolver = NameResolver()
        assert resolver.category_for("c1") is None
        assert resolver.payee_for("p1") is None


@pytest.mark.actual
class TestBuildMaps:
    """Test mapping construction."""

    def test_duplicate_ids_last_write_wins(self):
        categories = build_category_map(
            [ActualCategory(id="c1", name="First"), ActualCategory(id="c1", name="Second", is_income=True)]
        )
        payees = build_payee_map([ActualPayee(id="p1", name="Old"), ActualPayee(id="p1", name="New")])

        assert len(categories) == 1
        assert categories["c1"].name == "Second"
        assert categories["c1"].is_income
        assert payees["p1"].name == "New"

    def test_from_entities_accepts_generators(self):
        resolver = NameResolver.from_entities(
            (ActualCategory(id=f"c{i}", name=f"Cat {i}") for i in range(3)),
            iter([]),
        )
        assert set(resolver.categories) == {"c0", "c1", "c2"}
        assert resolver.payees == {}
