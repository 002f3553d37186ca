import logging
from typing import List, Optional, Sequence
from .models import ContainerType, FitResult, Placement
from .config import CM_PER_M, PALETTE, DEFAULT_ITEM_COLOR

logger = logging.getLogger(__name__)

class PaletteColors:
    """Cycle a fixed palette by placement index."""
    def __init__(self, palette: Sequence[str] = PALETTE):
        if not palette:
            raise ValueError("palette must not be empty")
        self.palette = tuple(palette)

    def color_for(self, index: int, item_color: Optional[str] = None) -> str:
        return self.palette[index % len(self.palette)]

class ItemColors:
    """Every copy takes the item's own declared color."""
    def __init__(self, default: str = DEFAULT_ITEM_COLOR):
        self.default = default

    def color_for(self, index: int, item_color: Optional[str] = None) -> str:
        return item_color or self.default

def color_policy(name: str, palette: Optional[Sequence[str]] = None):
    if name == "palette":
        return PaletteColors(palette or PALETTE)
    if name == "item":
        return ItemColors()
    raise ValueError(f"unknown color policy: {name!r} (expected 'palette' or 'item')")

def generate_placements(container: ContainerType, fit: FitResult, colors=None,
                        item_color: Optional[str] = None) -> List[Placement]:
    """Lay out up to `fit.max_fit` copies on the best orientation's grid.

    Walks height, then width, then length using the per-axis counts carried in
    `fit.grid`. Centres are derived from the integer index. Output is in meters
    with the origin at the container's centre: width -> x, height -> y, length -> z.
    """
    colors = colors or PaletteColors()
    o = fit.best_orientation
    n_l, n_w, n_h = fit.grid
    if n_l * n_w * n_h != fit.max_fit:
        logger.warning("grid %s disagrees with max_fit=%d for %s", fit.grid, fit.max_fit, container.name)

    placed: List[Placement] = []
    for k in range(n_h):
        cz = (k + 0.5) * o.h
        for j in range(n_w):
            cy = (j + 0.5) * o.w
            for i in range(n_l):
                if len(placed) >= fit.max_fit:
                    return placed
                cx = (i + 0.5) * o.l
                placed.append(Placement(
                    x=(cy - container.W / 2) / CM_PER_M,
                    y=(cz - container.H / 2) / CM_PER_M,
                    z=(cx - container.L / 2) / CM_PER_M,
                    width=o.w / CM_PER_M, height=o.h / CM_PER_M, length=o.l / CM_PER_M,
                    color=colors.color_for(len(placed), item_color),
                ))
    logger.debug("placed %d copies of %s in %s", len(placed), o.as_tuple(), container.name)
    return placed
