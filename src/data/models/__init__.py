# Data Models
from .champion import Champion
from .strategy import Strategy
from .trait import TraitRule, TraitCategory

__all__ = [
    "Champion",
    "Strategy",
    "TraitRule",
    "TraitCategory",
]
