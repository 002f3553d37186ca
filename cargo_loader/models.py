from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

@dataclass
class Item:
    L: float; W: float; H: float   # cm
    weight: float                  # kg per unit
    quantity: int = 1
    color: Optional[str] = None    # None: config.DEFAULT_ITEM_COLOR
    name: str = ""
    cbm: float = field(init=False)  # m³ for one unit
    def __post_init__(self): self.cbm = self.L*self.W*self.H/1_000_000

    def shape(self):
        return (self.L, self.W, self.H)

@dataclass(frozen=True)
class ContainerType:
    name: str
    cbm: float
    weight: float                  # max payload kg
    L: float; W: float; H: float   # internal cm

    def dims(self):
        return (self.L, self.W, self.H)

@dataclass(frozen=True)
class Orientation:
    l: float; w: float; h: float

    @classmethod
    def zero(cls):
        return cls(0, 0, 0)

    def as_tuple(self):
        return (self.l, self.w, self.h)

@dataclass(frozen=True)
class FitResult:
    max_fit: int
    best_orientation: Orientation
    grid: Tuple[int, int, int] = (0, 0, 0)   # copies along length, width, height

    @classmethod
    def empty(cls):
        return cls(0, Orientation.zero(), (0, 0, 0))

@dataclass
class ItemDetail:
    L: float; W: float; H: float
    weight: float
    quantity: int
    color: str
    cbm: float
    total_weight: float
    name: str = ""

@dataclass
class ContainerLoadDetail:
    container_name: str
    container_cbm: float
    container_weight: float
    max_items_fit: int
    best_fit_orientation: Orientation
    required_containers: int

@dataclass
class SuggestedContainer:
    name: str
    cbm: Union[float, str]
    weight: Optional[float]
    dimensions: Optional[ContainerType]
    required_count: int
    fit: FitResult = field(default_factory=FitResult.empty)
    is_sentinel: bool = False

@dataclass
class Placement:
    x: float; y: float; z: float              # m, origin at container centre
    width: float; height: float; length: float  # m
    color: str

@dataclass
class LoadResult:
    total_cbm: float
    total_weight: float
    suggested: SuggestedContainer
    item_details: List[ItemDetail]
    container_details: List[ContainerLoadDetail]
    container_dimensions: Optional[ContainerType] = None
    placements: List[Placement] = field(default_factory=list)
    utilization_pct: Optional[float] = None
    single_shape: bool = False
