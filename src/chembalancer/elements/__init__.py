from .base import Element, ElementProvider
from .table import PERIODIC_TABLE, StaticPeriodicTable

__all__ = ["Element", "ElementProvider", "PERIODIC_TABLE", "StaticPeriodicTable"]
