import logging

import pytest

from cargo_loader.calculator import calculate_load
from cargo_loader.config import CONTAINER_TYPES, NO_FIT_NAME, NOT_APPLICABLE
from cargo_loader.models import Item, Orientation
from cargo_loader.packer import ItemColors


def _make_item(l=200, w=150, h=150, weight=100, quantity=1, color="#FF5733"):
    return Item(l, w, h, weight=weight, quantity=quantity, color=color)


def test_single_item_fits_twenty_foot():
    result = calculate_load([_make_item()])

    assert result.total_cbm == pytest.approx(4.5)
    assert result.total_weight == 100
    assert result.suggested.name == "20ft Standard"
    assert result.suggested.required_count == 1
    assert result.suggested.fit.max_fit == 3
    assert result.container_details[0].required_containers == 1
    assert result.container_details[0].max_items_fit >= 1
    assert result.container_dimensions == CONTAINER_TYPES[0]
    assert len(result.placements) == 3
    assert result.utilization_pct == 13.6
    assert result.single_shape


def test_item_longer_than_container_fits_nowhere():
    result = calculate_load([_make_item(1204, 235, 239)])

    fits = {d.container_name: d.max_items_fit for d in result.container_details}
    assert fits == {"20ft Standard": 0, "40ft Standard": 0, "40ft High Cube": 0}
    # volume alone still says one 40ft unit; there is just nothing to lay out
    assert result.suggested.name == "40ft Standard"
    assert result.placements == []


def test_item_at_forty_foot_limit_fits_once():
    result = calculate_load([_make_item(1203, 235, 239)])

    details = {d.container_name: d for d in result.container_details}
    assert details["40ft Standard"].max_items_fit == 1
    assert details["40ft High Cube"].max_items_fit == 1
    assert details["20ft Standard"].max_items_fit == 0
    assert len(result.placements) == 1


def test_empty_load_reports_sentinel():
    result = calculate_load([])

    assert result.suggested.name == NO_FIT_NAME
    assert result.suggested.cbm == NOT_APPLICABLE
    assert result.suggested.dimensions is None
    assert [d.required_containers for d in result.container_details] == [0, 0, 0]
    assert result.total_cbm == 0
    assert result.placements == []
    assert result.container_dimensions is None
    assert result.utilization_pct is None


def test_multiple_rows_skip_fit_and_placement():
    items = [_make_item(100, 100, 100, quantity=2), _make_item(50, 50, 50, weight=10, quantity=8)]

    result = calculate_load(items)

    assert not result.single_shape
    assert result.total_cbm == pytest.approx(3.0)
    assert result.suggested.name == "20ft Standard"
    assert all(d.max_items_fit == 0 for d in result.container_details)
    assert all(d.best_fit_orientation == Orientation(0, 0, 0) for d in result.container_details)
    assert result.placements == []
    assert result.container_dimensions is None


def test_overweight_load_needs_several_containers():
    result = calculate_load([_make_item(100, 100, 100, weight=20000, quantity=3)])

    assert result.suggested.name == "3 x 20ft Standard"
    assert result.suggested.required_count == 3
    assert len(result.placements) == 20


def test_tiny_heavy_item_rounds_to_no_container():
    result = calculate_load([_make_item(10, 10, 10, weight=30000)])

    assert result.total_cbm == 0.0
    assert result.total_weight == 30000
    assert [d.required_containers for d in result.container_details] == [2, 2, 2]
    assert result.suggested.name == NO_FIT_NAME
    assert result.placements == []


def test_tiny_light_item_still_picked_by_weight():
    result = calculate_load([_make_item(10, 10, 10, weight=100)])

    assert result.total_cbm == 0.0
    assert result.suggested.name == "20ft Standard"
    assert result.utilization_pct == 0.0


def test_item_color_policy_applies_declared_color():
    result = calculate_load([_make_item(color="#00CED1")], colors=ItemColors())

    assert {p.color for p in result.placements} == {"#00CED1"}


def test_selected_container_drives_layout_only():
    result = calculate_load([_make_item()], selected_container="40ft High Cube")

    assert result.suggested.name == "20ft Standard"
    assert result.container_dimensions == CONTAINER_TYPES[2]
    assert len(result.placements) == 8


def test_unknown_selected_container_is_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="cargo_loader.calculator"):
        result = calculate_load([_make_item()], selected_container="53ft Reefer")

    assert result.container_dimensions == CONTAINER_TYPES[0]
    assert len(result.placements) == 3
    assert "53ft Reefer" in caplog.text


def test_invalid_dimension_fails_closed():
    result = calculate_load([_make_item(0, 150, 150)])

    assert all(d.max_items_fit == 0 for d in result.container_details)
    assert result.placements == []


def test_recalculation_is_deterministic():
    items = [_make_item(57, 33, 41, quantity=10)]

    assert calculate_load(items) == calculate_load(items)
