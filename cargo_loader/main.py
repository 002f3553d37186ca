import argparse, logging, os, sys
import pandas as pd
from .config import CONTAINER_TYPES, DEFAULT_ITEM_COLOR, Flags, NOT_APPLICABLE
from .models import Item, ContainerType
from .calculator import calculate_load
from .packer import color_policy
from .logger import setup_logging
from .utils import (format_cbm, result_to_dict, container_details_frame,
                    save_placements_csv, save_report_json, save_details_csv)

logger = logging.getLogger(__name__)

def _positive(value, field, row_no):
    if pd.isna(value):
        raise ValueError(f"row {row_no}: {field} is missing")
    value = float(value)
    if value <= 0:
        raise ValueError(f"row {row_no}: {field} must be greater than 0")
    return value

def load_items_csv(path):
    df = pd.read_csv(path)
    # Accept *_cm, bare L/W/H (cm) or *_mm headers; cm preferred.
    def get_dim(row, cm, short, mm, row_no):
        if cm in df.columns: return _positive(row[cm], cm, row_no)
        if short in df.columns: return _positive(row[short], short, row_no)
        if mm in df.columns: return _positive(row[mm], mm, row_no) / 10.0
        raise ValueError(f"{path}: no {cm}, {short} or {mm} column")

    items = []
    for idx, r in df.iterrows():
        row_no = idx + 1
        qty = r.get("quantity", 1)
        if pd.isna(qty) or int(qty) < 1 or float(qty) != int(qty):
            raise ValueError(f"row {row_no}: quantity must be at least 1")
        color = r.get("color", DEFAULT_ITEM_COLOR)
        name = r.get("name", r.get("item_id", ""))
        items.append(Item(
            L=get_dim(r, "length_cm", "L", "length_mm", row_no),
            W=get_dim(r, "width_cm", "W", "width_mm", row_no),
            H=get_dim(r, "height_cm", "H", "height_mm", row_no),
            weight=_positive(r.get("weight_kg", 1.0), "weight_kg", row_no),
            quantity=int(qty),
            color=DEFAULT_ITEM_COLOR if pd.isna(color) else str(color),
            name="" if pd.isna(name) else str(name),
        ))
    return items

def load_catalog_csv(path):
    df = pd.read_csv(path)
    required = ["name", "cbm", "weight_kg", "length_cm", "width_cm", "height_cm"]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing columns {', '.join(missing)}")
    catalog, seen = [], set()
    for idx, r in df.iterrows():
        row_no = idx + 1
        name = str(r["name"]).strip()
        if not name or name in seen:
            raise ValueError(f"row {row_no}: container name must be unique and non-empty")
        seen.add(name)
        catalog.append(ContainerType(
            name,
            cbm=_positive(r["cbm"], "cbm", row_no),
            weight=_positive(r["weight_kg"], "weight_kg", row_no),
            L=_positive(r["length_cm"], "length_cm", row_no),
            W=_positive(r["width_cm"], "width_cm", row_no),
            H=_positive(r["height_cm"], "height_cm", row_no),
        ))
    return tuple(catalog)

def main(argv=None):
    flags = Flags()
    ap = argparse.ArgumentParser(description="Container load calculator")
    ap.add_argument("--items", required=True)
    ap.add_argument("--catalog", default=None)
    ap.add_argument("--container", default=None, help="lay placements out in this container")
    ap.add_argument("--colors", choices=["palette", "item"], default=flags.color_policy)
    ap.add_argument("--out-dir", default=".")
    ap.add_argument("--no-write", action="store_true")
    ap.add_argument("--log-level", default="INFO")
    ap.add_argument("--log-file", default=None)
    args = ap.parse_args(argv)
    flags.color_policy = args.colors
    flags.write_outputs = not args.no_write

    setup_logging(args.log_level.upper(), args.log_file)
    try:
        catalog = load_catalog_csv(args.catalog) if args.catalog else CONTAINER_TYPES
        items = load_items_csv(args.items)
    except (ValueError, FileNotFoundError) as e:
        logger.error("invalid input: %s", e)
        return 2
    print(f"[INFO] Loaded {len(items)} item rows, {len(catalog)} container types")

    result = calculate_load(items, catalog, colors=color_policy(flags.color_policy),
                            selected_container=args.container)

    print(f"[INFO] Total CBM: {format_cbm(result.total_cbm)} m3 | Total weight: {result.total_weight} kg")
    s = result.suggested
    if s.cbm != NOT_APPLICABLE:
        print(f"[INFO] Suggested: {s.name} (utilization {result.utilization_pct}%)")
    else:
        print(f"[INFO] Suggested: {s.name}")
    print(container_details_frame(result).to_string(index=False))

    if flags.write_outputs:
        os.makedirs(args.out_dir, exist_ok=True)
        out = lambda name: os.path.join(args.out_dir, name)
        save_report_json(result_to_dict(result), out("report.json"))
        save_details_csv(result, out("item_details.csv"), out("container_details.csv"))
        save_placements_csv(result.placements, out("packed_layout.csv"))
        print(f"[INFO] Wrote report.json, item_details.csv, container_details.csv"
              + (", packed_layout.csv" if result.placements else "") + f" to {args.out_dir}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
