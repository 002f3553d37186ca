"""
Debug runner: load items from a CSV and show how each orientation tiles each container.
Prints the per-axis grid of all six orientations, runs the full calculation and writes
a placements CSV for inspection.
Run:
    python3 run_pack_debug.py sample_items.csv
"""
import sys, csv
from cargo_loader.main import load_items_csv
from cargo_loader.config import CONTAINER_TYPES
from cargo_loader.fit import orientations, grid_counts, items_fit
from cargo_loader.selector import required_containers
from cargo_loader.calculator import calculate_load
from cargo_loader.utils import format_cbm

if len(sys.argv) < 2:
    print('Usage: python3 run_pack_debug.py <items.csv>')
    sys.exit(1)

path = sys.argv[1]
try:
    items = load_items_csv(path)
except ValueError as e:
    print('Could not load items:', e, file=sys.stderr)
    sys.exit(2)
print(f'Loaded {len(items)} item rows from {path}')

if len(items) == 1:
    it = items[0]
    for c in CONTAINER_TYPES:
        print(f'{c.name} ({c.L} x {c.W} x {c.H} cm):')
        for o in orientations(it.L, it.W, it.H):
            n_l, n_w, n_h = grid_counts(o.l, o.w, o.h, c.L, c.W, c.H)
            print(f'  {o.l} x {o.w} x {o.h}: {n_l} x {n_w} x {n_h} = {n_l*n_w*n_h}')
        fit = items_fit(it.shape(), c.dims())
        print(f'  best: {fit.best_orientation.as_tuple()} -> {fit.max_fit}')
else:
    print('Multiple item rows: grid fit is only computed for a single item shape')

result = calculate_load(items)
print(f'Total {format_cbm(result.total_cbm)} m3, {result.total_weight} kg -> {result.suggested.name}')
for c, d in zip(CONTAINER_TYPES, result.container_details):
    by_weight = required_containers(0, result.total_weight, c)
    print(f' {d.container_name}: fit={d.max_items_fit} required={d.required_containers} (by weight {by_weight})')

# write debug CSV
out = path.rsplit('.',1)[0] + '_debug_packed.csv'
keys = ["x","y","z","width","height","length","color"]
with open(out, 'w', newline='') as f:
    w = csv.DictWriter(f, fieldnames=keys); w.writeheader()
    for p in result.placements:
        w.writerow({k: getattr(p,k) for k in keys})
print(f'Wrote {len(result.placements)} placements to', out)
