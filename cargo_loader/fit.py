import logging, math
from typing import Tuple
from .models import Orientation, FitResult

logger = logging.getLogger(__name__)

def orientations(l, w, h):
    # fixed order: ties resolve to the earliest entry
    return [
        Orientation(l, w, h),
        Orientation(l, h, w),
        Orientation(w, l, h),
        Orientation(w, h, l),
        Orientation(h, l, w),
        Orientation(h, w, l),
    ]

def grid_counts(item_l, item_w, item_h, cont_l, cont_w, cont_h) -> Tuple[int, int, int]:
    """Copies of one orientation along each container axis (length, width, height).

    Plain greedy grid: no second orientation in the leftover space, no offset rows.
    Counts are floor(container / item) per axis, so exact non-integer
    divisions such as 589.8 / 196.6 count in full.
    Any non-positive input yields (0, 0, 0).
    """
    if min(item_l, item_w, item_h, cont_l, cont_w, cont_h) <= 0:
        return (0, 0, 0)
    n_h = math.floor(cont_h / item_h)
    n_w = math.floor(cont_w / item_w)
    n_l = math.floor(cont_l / item_l)
    return (n_l, n_w, n_h)

def items_fit_in_one_orientation(item_l, item_w, item_h, cont_l, cont_w, cont_h) -> int:
    n_l, n_w, n_h = grid_counts(item_l, item_w, item_h, cont_l, cont_w, cont_h)
    return n_h * n_w * n_l

def items_fit(item_dims, container_dims) -> FitResult:
    """Best of the six axis permutations of `item_dims` inside `container_dims`.

    Both arguments are (length, width, height) triples in the same unit. The
    returned grid holds the per-axis counts of the winning orientation so the
    placement step can replay it without recomputing.
    """
    l, w, h = item_dims
    cont_l, cont_w, cont_h = container_dims
    max_fit = 0
    best = Orientation(l, w, h)
    best_grid = (0, 0, 0)
    for o in orientations(l, w, h):
        grid = grid_counts(o.l, o.w, o.h, cont_l, cont_w, cont_h)
        current = grid[0] * grid[1] * grid[2]
        if current > max_fit:
            max_fit, best, best_grid = current, o, grid
    logger.debug("fit %sx%sx%s in %sx%sx%s -> %d as %s",
                 l, w, h, cont_l, cont_w, cont_h, max_fit, best.as_tuple())
    return FitResult(max_fit, best, best_grid)
