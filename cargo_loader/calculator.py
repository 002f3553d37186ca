import logging
from typing import Dict, List, Optional, Sequence
from .models import Item, ContainerType, FitResult, LoadResult
from .config import CONTAINER_TYPES
from .aggregate import aggregate
from .fit import items_fit
from .selector import rank_containers, select_container
from .packer import generate_placements, PaletteColors

logger = logging.getLogger(__name__)

def calculate_load(items: List[Item], catalog: Sequence[ContainerType] = CONTAINER_TYPES,
                   colors=None, selected_container: Optional[str] = None) -> LoadResult:
    """Totals, per-container analysis, suggested container and placements for one load.

    Geometric fit and placements only apply to a single item row; multi-row loads
    get totals and capacity-based container counts. Never raises on bad geometry:
    an empty or unplaceable load comes back with the "No container fits" sentinel.
    """
    colors = colors or PaletteColors()
    item_details, total_cbm, total_weight = aggregate(items)
    single_shape = len(items) == 1
    logger.debug("load: %d rows, %.3f m3, %.1f kg", len(items), total_cbm, total_weight)

    fits: Dict[str, FitResult] = {}
    if single_shape:
        for c in catalog:
            fits[c.name] = items_fit(items[0].shape(), c.dims())

    container_details = rank_containers(total_cbm, total_weight, catalog, fits)
    suggested = select_container(total_cbm, total_weight, catalog, fits)

    target, target_fit = suggested.dimensions, suggested.fit
    if selected_container:
        match = next((c for c in catalog if c.name == selected_container), None)
        if match is None:
            logger.warning("selected container %r not in catalog, ignoring", selected_container)
        else:
            target, target_fit = match, fits.get(match.name, FitResult.empty())

    container_dimensions = None
    placements = []
    if target is not None and single_shape:
        container_dimensions = target
        placements = generate_placements(target, target_fit, colors, item_color=items[0].color)

    utilization = None
    if not suggested.is_sentinel:
        utilization = round(total_cbm / suggested.cbm * 100, 1)

    return LoadResult(
        total_cbm=total_cbm,
        total_weight=total_weight,
        suggested=suggested,
        item_details=item_details,
        container_details=container_details,
        container_dimensions=container_dimensions,
        placements=placements,
        utilization_pct=utilization,
        single_shape=single_shape,
    )
