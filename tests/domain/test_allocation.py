"""Tests for deficit-proportional contribution allocation."""

from datetime import date
from decimal import Decimal

import pytest

from portfolio_tracker.domain.models import Asset, AssetClass
from portfolio_tracker.domain.services.accounting import (
    compute_class_values,
    compute_portfolio_value,
)
from portfolio_tracker.domain.services.allocation import (
    allocate,
    allocate_classes,
)


def _class(class_id: str, target: str) -> AssetClass:
    return AssetClass(
        id=class_id,
        name=f"Class {class_id}",
        target_percent=Decimal(target),
    )


def _asset(
    asset_id: str,
    class_id: str,
    quantity: str,
    price: str = "100",
    weight: str = "100",
) -> Asset:
    return Asset(
        id=asset_id,
        ticker=asset_id.upper(),
        class_id=class_id,
        quantity=Decimal(quantity),
        purchase_date=date(2024, 1, 1),
        purchase_price=Decimal(price),
        current_price=Decimal(price),
        target_percent=Decimal(weight),
    )


def _allocate(amount: str, classes, assets):
    return allocate(
        Decimal(amount),
        classes,
        compute_class_values(assets, classes),
        assets,
        compute_portfolio_value(assets),
    )


def _class_amounts(result) -> dict[str, Decimal]:
    return {item.class_id: item.amount for item in result.class_allocations}


def test_all_money_goes_to_underweight_class() -> None:
    """A 70/30 portfolio with 50/50 targets sends everything to the short class."""
    classes = [_class("A", "50"), _class("B", "50")]
    assets = [_asset("a", "A", "70"), _asset("b", "B", "30")]

    result = _allocate("1000", classes, assets)

    amounts = _class_amounts(result)
    assert amounts["A"] == Decimal("0")
    assert amounts["B"] == Decimal("1000")
    assert [item.asset_id for item in result.asset_allocations] == ["b"]
    assert result.asset_allocations[0].amount == Decimal("1000")
    assert result.asset_allocations[0].suggested_quantity == Decimal("10")


def test_balanced_portfolio_splits_by_target() -> None:
    """A portfolio on target splits new money by the target weights."""
    classes = [_class("A", "50"), _class("B", "50")]
    assets = [_asset("a", "A", "50"), _asset("b", "B", "50")]

    result = _allocate("1000", classes, assets)

    amounts = _class_amounts(result)
    assert amounts == {"A": Decimal("500"), "B": Decimal("500")}


def test_no_deficit_falls_back_to_target_weights() -> None:
    """Without any shortfall the amount follows the target weights."""
    classes = [_class("A", "60"), _class("B", "40")]

    allocations = allocate_classes(
        Decimal("1000"),
        classes,
        {"A": Decimal("9000"), "B": Decimal("9000")},
        Decimal("10000"),
    )

    assert [item.deficit for item in allocations] == [Decimal("0"), Decimal("0")]
    assert [item.amount for item in allocations] == [
        Decimal("600"),
        Decimal("400"),
    ]


def test_overweight_class_gets_nothing_while_others_are_short() -> None:
    """A class above its ideal value receives zero."""
    classes = [_class("A", "30"), _class("B", "30"), _class("C", "40")]
    assets = [
        _asset("a", "A", "80"),
        _asset("b", "B", "10"),
        _asset("c", "C", "10"),
    ]

    result = _allocate("500", classes, assets)

    amounts = _class_amounts(result)
    assert amounts["A"] == Decimal("0")
    assert amounts["B"] > 0
    assert amounts["C"] > amounts["B"]


@pytest.mark.parametrize(
    "amount,targets,quantities",
    [
        ("1000", ("50", "50"), ("70", "30")),
        ("333.33", ("30", "20", "50"), ("1", "2", "3")),
        ("0.10", ("10", "10", "80"), ("0", "0", "0")),
        ("12345.67", ("25", "25", "25", "25"), ("40", "0", "10", "3")),
        ("1000", ("30", "20"), ("10", "10")),
    ],
)
def test_class_amounts_add_up_to_contribution(amount, targets, quantities) -> None:
    """Class amounts should always sum to the contributed amount."""
    classes = [_class(str(i), target) for i, target in enumerate(targets)]
    assets = [
        _asset(f"a{i}", str(i), quantity)
        for i, quantity in enumerate(quantities)
    ]

    result = _allocate(amount, classes, assets)

    total = sum(_class_amounts(result).values(), Decimal("0"))
    assert abs(total - Decimal(amount)) < Decimal("0.000001")
    assert all(value >= 0 for value in _class_amounts(result).values())


def test_assets_split_by_relative_weight() -> None:
    """Inside a class, money follows the assets' relative weights."""
    classes = [_class("A", "100")]
    assets = [
        _asset("a1", "A", "0", weight="60"),
        _asset("a2", "A", "0", weight="40"),
        _asset("a3", "A", "0", weight="0"),
    ]

    result = _allocate("1000", classes, assets)

    assert [(item.asset_id, item.amount) for item in result.asset_allocations] == [
        ("a1", Decimal("600")),
        ("a2", Decimal("400")),
    ]
    assert result.allocated_to_assets == Decimal("1000")


def test_class_without_weights_allocates_no_assets() -> None:
    """A class whose assets all weigh zero yields no asset suggestions."""
    classes = [_class("A", "100")]
    assets = [_asset("a1", "A", "0", weight="0")]

    result = _allocate("1000", classes, assets)

    assert _class_amounts(result) == {"A": Decimal("1000")}
    assert result.asset_allocations == []


def test_dust_allocations_are_dropped() -> None:
    """Asset amounts below one cent are not suggested."""
    classes = [_class("A", "100")]
    assets = [
        _asset("big", "A", "0", weight="99999"),
        _asset("dust", "A", "0", weight="1"),
    ]

    result = _allocate("100", classes, assets)

    assert [item.asset_id for item in result.asset_allocations] == ["big"]


def test_asset_without_quote_has_no_suggested_quantity() -> None:
    """A zero quote leaves the quantity empty but keeps the amount."""
    classes = [_class("A", "100")]
    assets = [_asset("a1", "A", "0", price="0")]

    result = _allocate("250", classes, assets)

    allocation = result.asset_allocations[0]
    assert allocation.amount == Decimal("250")
    assert allocation.price == Decimal("0")
    assert allocation.suggested_quantity is None


def test_orphan_assets_are_not_allocated() -> None:
    """Assets outside every configured class get nothing."""
    classes = [_class("A", "100")]
    assets = [_asset("a1", "A", "1"), _asset("orphan", "Z", "1")]

    result = _allocate("100", classes, assets)

    assert [item.asset_id for item in result.asset_allocations] == ["a1"]


def test_zero_targets_allocate_nothing() -> None:
    """Classes with no target weight receive nothing."""
    classes = [_class("A", "0"), _class("B", "0")]
    assets = [_asset("a", "A", "1"), _asset("b", "B", "1")]

    result = _allocate("1000", classes, assets)

    assert _class_amounts(result) == {"A": Decimal("0"), "B": Decimal("0")}
    assert result.asset_allocations == []


def test_asset_allocations_sorted_largest_first() -> None:
    """Asset suggestions are ordered by amount, largest first."""
    classes = [_class("A", "20"), _class("B", "80")]
    assets = [_asset("a", "A", "0"), _asset("b", "B", "0")]

    result = _allocate("1000", classes, assets)

    amounts = [item.amount for item in result.asset_allocations]
    assert amounts == sorted(amounts, reverse=True)
    assert result.asset_allocations[0].asset_id == "b"


def test_empty_inputs() -> None:
    """No classes means nothing is allocated."""
    result = allocate(Decimal("1000"), [], {}, [], Decimal("0"))

    assert result.class_allocations == []
    assert result.asset_allocations == []
