import json

import pandas as pd

from cargo_loader.calculator import calculate_load
from cargo_loader.models import Item
from cargo_loader.utils import (
    container_details_frame,
    format_cbm,
    item_details_frame,
    result_to_dict,
    save_details_csv,
    save_placements_csv,
    save_report_json,
)


def _single():
    return calculate_load([Item(200, 150, 150, weight=100, quantity=1)])


def test_format_cbm_two_decimals():
    assert format_cbm(4.5) == "4.50"
    assert format_cbm(0) == "0.00"
    assert format_cbm(67.62266) == "67.62"


def test_result_dict_matches_ui_keys():
    data = result_to_dict(_single())

    results = data["results"]
    assert results["totalCBM"] == "4.50"
    assert results["totalWeight"] == 100
    assert results["suggestedContainer"]["name"] == "20ft Standard"
    assert results["suggestedContainer"]["itemsFitResult"]["maxFit"] == 3
    assert results["itemDetails"][0]["cbm"] == "4.50"
    assert len(results["containerLoadDetails"]) == 3
    assert results["containerLoadDetails"][0]["bestFitOrientation"] == {"l": 150, "w": 200, "h": 150}
    assert data["containerDimensions"] == {"length": 589.8, "width": 235.2, "height": 239.0}
    assert len(data["packedItems"]) == 3
    assert set(data["packedItems"][0]) == {"position", "dimensions", "color"}
    json.dumps(data)


def test_result_dict_for_sentinel():
    data = result_to_dict(calculate_load([]))

    assert data["results"]["totalCBM"] == "0.00"
    assert data["results"]["suggestedContainer"]["cbm"] == "N/A"
    assert data["results"]["suggestedContainer"]["dimensions"] is None
    assert data["containerDimensions"] is None
    assert data["packedItems"] == []


def test_container_frame_marks_multi_shape_fit_not_applicable():
    result = calculate_load([Item(100, 100, 100, weight=1), Item(50, 50, 50, weight=1)])

    frame = container_details_frame(result)

    assert list(frame["max_items_fit"]) == ["N/A (multiple item types)"] * 3
    assert list(frame["best_orientation"]) == ["N/A"] * 3
    assert list(frame["required_containers"]) == [1, 1, 1]


def test_container_frame_single_shape():
    frame = container_details_frame(_single())

    assert frame.loc[0, "max_items_fit"] == 3
    assert frame.loc[0, "best_orientation"] == "150x200x150"


def test_item_frame_columns():
    frame = item_details_frame(_single())

    assert list(frame.columns) == ["name", "L", "W", "H", "weight", "quantity", "color", "cbm", "total_weight"]
    assert frame.loc[0, "total_weight"] == 100


def test_writers(tmp_path):
    result = _single()

    save_placements_csv(result.placements, tmp_path / "layout.csv")
    save_details_csv(result, tmp_path / "items.csv", tmp_path / "containers.csv")
    save_report_json(result_to_dict(result), tmp_path / "report.json")

    layout = pd.read_csv(tmp_path / "layout.csv")
    assert len(layout) == 3
    assert list(layout.columns) == ["x", "y", "z", "width", "height", "length", "color"]
    assert len(pd.read_csv(tmp_path / "containers.csv")) == 3
    assert json.loads((tmp_path / "report.json").read_text())["results"]["totalCBM"] == "4.50"


def test_no_layout_file_without_placements(tmp_path):
    save_placements_csv([], tmp_path / "layout.csv")

    assert not (tmp_path / "layout.csv").exists()
