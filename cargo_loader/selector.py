import logging
import numpy as np
from typing import Dict, List, Optional, Sequence
from .models import ContainerType, ContainerLoadDetail, FitResult, SuggestedContainer
from .config import NO_FIT_NAME, NOT_APPLICABLE

logger = logging.getLogger(__name__)

def required_containers(total_cbm, total_weight, container: ContainerType) -> int:
    """Units of one container type needed; single-entry form of container_requirements."""
    return container_requirements(total_cbm, total_weight, [container])[0]

def container_requirements(total_cbm, total_weight, catalog: Sequence[ContainerType]) -> List[int]:
    """Units of each catalog container needed for the load, in catalog order."""
    n = len(catalog)
    cap_vol = np.array([c.cbm for c in catalog], dtype=float)
    cap_wt = np.array([c.weight for c in catalog], dtype=float)
    by_vol = np.ceil(total_cbm / cap_vol) if total_cbm > 0 else np.zeros(n)
    by_wt = np.ceil(total_weight / cap_wt) if total_weight > 0 else np.zeros(n)
    return [int(r) for r in np.maximum(by_vol, by_wt)]

def rank_containers(total_cbm, total_weight, catalog: Sequence[ContainerType],
                    fits: Optional[Dict[str, FitResult]] = None) -> List[ContainerLoadDetail]:
    fits = fits or {}
    details = []
    for c, req in zip(catalog, container_requirements(total_cbm, total_weight, catalog)):
        fit = fits.get(c.name, FitResult.empty())
        details.append(ContainerLoadDetail(
            container_name=c.name,
            container_cbm=c.cbm,
            container_weight=c.weight,
            max_items_fit=fit.max_fit,
            best_fit_orientation=fit.best_orientation,
            required_containers=req,
        ))
    return details

def no_container() -> SuggestedContainer:
    return SuggestedContainer(NO_FIT_NAME, NOT_APPLICABLE, None, None, 0, is_sentinel=True)

def select_container(total_cbm, total_weight, catalog: Sequence[ContainerType],
                     fits: Optional[Dict[str, FitResult]] = None) -> SuggestedContainer:
    """Smallest container taking the whole load in one unit, else N units of the smallest.

    Falls through to the "No container fits" sentinel for an empty load.
    """
    fits = fits or {}
    required = container_requirements(total_cbm, total_weight, catalog)

    chosen = None
    for c, req in zip(catalog, required):
        if req != 1:
            continue
        # first single-unit container seeds; later ones must also hold the totals and be smaller
        if chosen is None or (c.cbm >= total_cbm and c.weight >= total_weight and c.cbm < chosen.cbm):
            chosen = c
    if chosen is not None:
        logger.info("single container: %s", chosen.name)
        return SuggestedContainer(chosen.name, chosen.cbm, chosen.weight, chosen, 1,
                                  fit=fits.get(chosen.name, FitResult.empty()))

    if total_cbm > 0:
        for c, req in sorted(zip(catalog, required), key=lambda cr: cr[0].cbm):
            if req >= 1:
                logger.info("no single container holds the load, using %d x %s", req, c.name)
                return SuggestedContainer(f"{req} x {c.name}", c.cbm, c.weight, c, req,
                                          fit=fits.get(c.name, FitResult.empty()))

    logger.info("no container fits (total_cbm=%.2f, total_weight=%.1f)", total_cbm, total_weight)
    return no_container()
