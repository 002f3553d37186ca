from dataclasses import dataclass
from .models import ContainerType

# Internal dimensions in cm, payload in kg.
CONTAINER_TYPES = (
    ContainerType("20ft Standard", cbm=33.2, weight=28200.0, L=589.8, W=235.2, H=239.0),
    ContainerType("40ft Standard", cbm=67.7, weight=28700.0, L=1203.2, W=235.2, H=239.0),
    ContainerType("40ft High Cube", cbm=76.4, weight=29700.0, L=1203.2, W=235.2, H=269.8),
)

@dataclass
class Flags:
    color_policy: str = "palette"   # "palette" | "item"
    write_outputs: bool = True

CM_PER_M: int = 100

NO_FIT_NAME = "No container fits"
NOT_APPLICABLE = "N/A"
DEFAULT_ITEM_COLOR = "#FF5733"

PALETTE = (
    '#FF6B6B', '#4ECDC4', '#45B7D1', '#96CEB4', '#FFEEAD',
    '#D4A5A5', '#9B59B6', '#3498DB', '#E74C3C', '#2ECC71',
    '#F1C40F', '#E67E22', '#1ABC9C', '#9B59B6', '#34495E',
    '#F39C12', '#D35400', '#7F8C8D', '#8E44AD', '#C0392B',
    '#2980B9', '#27AE60', '#F1C40F', '#16A085', '#8E44AD',
    '#2C3E50', '#E91E63', '#3F51B5', '#009688', '#FF9800',
    '#795548', '#9E9E9E', '#607D8B', '#FF5722', '#673AB7',
    '#2196F3', '#00BCD4', '#4CAF50', '#FFC107', '#9C27B0',
    '#03A9F4', '#8BC34A', '#CDDC39', '#FFEB3B', '#FFCDD2',
    '#EF5350', '#EC407A', '#AB47BC', '#7E57C2', '#5C6BC0',
)
