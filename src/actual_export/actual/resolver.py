#!/usr/bin/env python3
"""
Name Resolver

Lookup tables from category and payee ids to their entities, built once
per run from the full listings. A missing entry is an expected state: the
lookups answer None and rendering falls back to a placeholder.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .models import ActualCategory, ActualPayee


def build_category_map(categories: Iterable[ActualCategory]) -> dict[str, ActualCategory]:
    """Map category id to category. Duplicate ids: last one wins."""
    return {category.id: category for category in categories}


def build_payee_map(payees: Iterable[ActualPayee]) -> dict[str, ActualPayee]:
    """Map payee id to payee. Duplicate ids: last one wins."""
    return {payee.id: payee for payee in payees}


@dataclass
class NameResolver:
    """
    Resolves category and payee ids into entities.

    Example:
        >>> resolver = NameResolver.from_entities(
        ...     [ActualCategory(id="c1", name="Salary", is_income=True)],
        ...     [ActualPayee(id="p1", name="Employer")],
        ... )
        >>> resolver.category_for("c1").name
        'Salary'
        >>> resolver.payee_for("missing") is None
        True
    """

    categories: dict[str, ActualCategory] = field(default_factory=dict)
    payees: dict[str, ActualPayee] = field(default_factory=dict)

    @classmethod
    def from_entities(
        cls,
        categories: Iterable[ActualCategory],
        payees: Iterable[ActualPayee],
    ) -> "NameResolver":
        """Build both lookup tables from flat entity listings."""
        return cls(
            categories=build_category_map(categories),
            payees=build_payee_map(payees),
        )

    def category_for(self, category_id: str | None) -> ActualCategory | None:
        """Get the category for an id, or None when empty or unknown."""
        if not category_id:
            return None
        return self.categories.get(category_id)

    def payee_for(self, payee_id: str | None) -> ActualPayee | None:
        """Get the payee for an id, or None when empty or unknown."""
        if not payee_id:
            return None
        return self.payees.get(payee_id)
