from typing import List, Tuple
from .models import Item, ItemDetail
from .config import DEFAULT_ITEM_COLOR

def item_detail(it: Item) -> ItemDetail:
    # row cbm is rounded to 2 decimals before it enters the totals
    cbm = round(it.cbm * it.quantity, 2)
    return ItemDetail(it.L, it.W, it.H, it.weight, it.quantity, it.color or DEFAULT_ITEM_COLOR,
                      cbm=cbm, total_weight=it.weight*it.quantity, name=it.name)

def aggregate(items: List[Item]) -> Tuple[List[ItemDetail], float, float]:
    # empty input is valid: zero totals
    details = [item_detail(it) for it in items]
    total_cbm = sum((d.cbm for d in details), 0.0)
    total_weight = sum((d.total_weight for d in details), 0.0)
    return details, total_cbm, total_weight
