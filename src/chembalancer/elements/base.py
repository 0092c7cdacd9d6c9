"""Base interface for periodic-table data providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional

from chembalancer.errors import UnknownElement


@dataclass(frozen=True)
class Element:
    symbol: str
    name: str
    atomic_number: int
    atomic_mass: float  # g/mol
    category: str


class ElementProvider(ABC):
    """Abstract read-only lookup of element reference data keyed by symbol."""

    @abstractmethod
    def get(self, symbol: str) -> Optional[Element]:
        """Return the element for ``symbol`` or ``None`` if it does not exist."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Element]:
        """Iterate over every element in atomic-number order."""
        pass

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and self.get(symbol) is not None

    def require(self, symbol: str) -> Element:
        element = self.get(symbol)
        if element is None:
            raise UnknownElement(symbol)
        return element

    def atomic_mass(self, symbol: str) -> float:
        return self.require(symbol).atomic_mass
