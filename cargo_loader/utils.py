import csv, json
import pandas as pd
from dataclasses import asdict
from .models import LoadResult, SuggestedContainer

def format_cbm(value) -> str:
    return f"{value:.2f}"

def _dims(c):
    if c is None: return None
    return {"length": c.L, "width": c.W, "height": c.H}

def _suggested_dict(s: SuggestedContainer):
    return {
        "name": s.name,
        "cbm": s.cbm,
        "weight": s.weight,
        "dimensions": _dims(s.dimensions),
        "requiredCount": s.required_count,
        "itemsFitResult": {"maxFit": s.fit.max_fit, "bestOrientation": asdict(s.fit.best_orientation)},
    }

def result_to_dict(result: LoadResult):
    """JSON-safe view of a calculation, keyed the way the UI layer reads it."""
    return {
        "results": {
            "totalCBM": format_cbm(result.total_cbm),
            "totalWeight": result.total_weight,
            "utilizationPct": result.utilization_pct,
            "suggestedContainer": _suggested_dict(result.suggested),
            "itemDetails": [
                {"name": d.name, "length": d.L, "width": d.W, "height": d.H,
                 "weight": d.weight, "quantity": d.quantity, "color": d.color,
                 "cbm": format_cbm(d.cbm), "totalWeight": d.total_weight}
                for d in result.item_details
            ],
            "containerLoadDetails": [
                {"containerName": d.container_name,
                 "containerCBM": d.container_cbm,
                 "containerWeight": d.container_weight,
                 "maxItemsFitInOneContainer": d.max_items_fit,
                 "bestFitOrientation": asdict(d.best_fit_orientation),
                 "requiredContainers": d.required_containers}
                for d in result.container_details
            ],
        },
        "containerDimensions": _dims(result.container_dimensions),
        "packedItems": [
            {"position": {"x": p.x, "y": p.y, "z": p.z},
             "dimensions": {"width": p.width, "height": p.height, "length": p.length},
             "color": p.color}
            for p in result.placements
        ],
    }

def item_details_frame(result: LoadResult) -> pd.DataFrame:
    cols = ["name", "L", "W", "H", "weight", "quantity", "color", "cbm", "total_weight"]
    return pd.DataFrame([asdict(d) for d in result.item_details], columns=cols)

def container_details_frame(result: LoadResult) -> pd.DataFrame:
    rows = []
    for d in result.container_details:
        o = d.best_fit_orientation
        fits = result.single_shape
        rows.append({
            "container": d.container_name,
            "cbm": d.container_cbm,
            "max_weight_kg": d.container_weight,
            "max_items_fit": d.max_items_fit if fits else "N/A (multiple item types)",
            "best_orientation": f"{o.l}x{o.w}x{o.h}" if fits and o.l > 0 else "N/A",
            "required_containers": d.required_containers,
        })
    return pd.DataFrame(rows, columns=["container", "cbm", "max_weight_kg", "max_items_fit",
                                       "best_orientation", "required_containers"])

def save_placements_csv(placements, path):
    if not placements: return
    keys = ["x","y","z","width","height","length","color"]
    with open(path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=keys); w.writeheader()
        for p in placements: w.writerow({k:getattr(p,k) for k in keys})

def save_details_csv(result: LoadResult, items_path, containers_path):
    item_details_frame(result).to_csv(items_path, index=False)
    container_details_frame(result).to_csv(containers_path, index=False)

def save_report_json(rep, path):
    with open(path, "w") as f: json.dump(rep, f, indent=2)
