"""Static periodic table with IUPAC standard atomic masses."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Tuple

from chembalancer.elements.base import Element, ElementProvider

ALKALI = "alkali metal"
ALKALINE = "alkaline earth metal"
TRANSITION = "transition metal"
POST_TRANSITION = "post-transition metal"
METALLOID = "metalloid"
NONMETAL = "nonmetal"
HALOGEN = "halogen"
NOBLE_GAS = "noble gas"
LANTHANIDE = "lanthanide"
ACTINIDE = "actinide"

# (symbol, name, atomic mass, category) in atomic-number order.
# Masses of elements without stable isotopes are those of the longest-lived isotope.
_ELEMENT_ROWS: Tuple[Tuple[str, str, float, str], ...] = (
    ("H", "Hydrogen", 1.008, NONMETAL),
    ("He", "Helium", 4.0026, NOBLE_GAS),
    ("Li", "Lithium", 6.941, ALKALI),
    ("Be", "Beryllium", 9.0122, ALKALINE),
    ("B", "Boron", 10.811, METALLOID),
    ("C", "Carbon", 12.011, NONMETAL),
    ("N", "Nitrogen", 14.007, NONMETAL),
    ("O", "Oxygen", 15.999, NONMETAL),
    ("F", "Fluorine", 18.998, HALOGEN),
    ("Ne", "Neon", 20.180, NOBLE_GAS),
    ("Na", "Sodium", 22.990, ALKALI),
    ("Mg", "Magnesium", 24.305, ALKALINE),
    ("Al", "Aluminium", 26.982, POST_TRANSITION),
    ("Si", "Silicon", 28.086, METALLOID),
    ("P", "Phosphorus", 30.974, NONMETAL),
    ("S", "Sulfur", 32.065, NONMETAL),
    ("Cl", "Chlorine", 35.453, HALOGEN),
    ("Ar", "Argon", 39.948, NOBLE_GAS),
    ("K", "Potassium", 39.098, ALKALI),
    ("Ca", "Calcium", 40.078, ALKALINE),
    ("Sc", "Scandium", 44.956, TRANSITION),
    ("Ti", "Titanium", 47.867, TRANSITION),
    ("V", "Vanadium", 50.942, TRANSITION),
    ("Cr", "Chromium", 51.996, TRANSITION),
    ("Mn", "Manganese", 54.938, TRANSITION),
    ("Fe", "Iron", 55.845, TRANSITION),
    ("Co", "Cobalt", 58.933, TRANSITION),
    ("Ni", "Nickel", 58.693, TRANSITION),
    ("Cu", "Copper", 63.546, TRANSITION),
    ("Zn", "Zinc", 65.38, TRANSITION),
    ("Ga", "Gallium", 69.723, POST_TRANSITION),
    ("Ge", "Germanium", 72.630, METALLOID),
    ("As", "Arsenic", 74.922, METALLOID),
    ("Se", "Selenium", 78.971, NONMETAL),
    ("Br", "Bromine", 79.904, HALOGEN),
    ("Kr", "Krypton", 83.798, NOBLE_GAS),
    ("Rb", "Rubidium", 85.468, ALKALI),
    ("Sr", "Strontium", 87.62, ALKALINE),
    ("Y", "Yttrium", 88.906, TRANSITION),
    ("Zr", "Zirconium", 91.224, TRANSITION),
    ("Nb", "Niobium", 92.906, TRANSITION),
    ("Mo", "Molybdenum", 95.95, TRANSITION),
    ("Tc", "Technetium", 98.0, TRANSITION),
    ("Ru", "Ruthenium", 101.07, TRANSITION),
    ("Rh", "Rhodium", 102.906, TRANSITION),
    ("Pd", "Palladium", 106.42, TRANSITION),
    ("Ag", "Silver", 107.868, TRANSITION),
    ("Cd", "Cadmium", 112.414, TRANSITION),
    ("In", "Indium", 114.818, POST_TRANSITION),
    ("Sn", "Tin", 118.710, POST_TRANSITION),
    ("Sb", "Antimony", 121.760, METALLOID),
    ("Te", "Tellurium", 127.60, METALLOID),
    ("I", "Iodine", 126.904, HALOGEN),
    ("Xe", "Xenon", 131.293, NOBLE_GAS),
    ("Cs", "Caesium", 132.905, ALKALI),
    ("Ba", "Barium", 137.327, ALKALINE),
    ("La", "Lanthanum", 138.905, LANTHANIDE),
    ("Ce", "Cerium", 140.116, LANTHANIDE),
    ("Pr", "Praseodymium", 140.908, LANTHANIDE),
    ("Nd", "Neodymium", 144.242, LANTHANIDE),
    ("Pm", "Promethium", 145.0, LANTHANIDE),
    ("Sm", "Samarium", 150.36, LANTHANIDE),
    ("Eu", "Europium", 151.964, LANTHANIDE),
    ("Gd", "Gadolinium", 157.25, LANTHANIDE),
    ("Tb", "Terbium", 158.925, LANTHANIDE),
    ("Dy", "Dysprosium", 162.500, LANTHANIDE),
    ("Ho", "Holmium", 164.930, LANTHANIDE),
    ("Er", "Erbium", 167.259, LANTHANIDE),
    ("Tm", "Thulium", 168.934, LANTHANIDE),
    ("Yb", "Ytterbium", 173.045, LANTHANIDE),
    ("Lu", "Lutetium", 174.967, LANTHANIDE),
    ("Hf", "Hafnium", 178.49, TRANSITION),
    ("Ta", "Tantalum", 180.948, TRANSITION),
    ("W", "Tungsten", 183.84, TRANSITION),
    ("Re", "Rhenium", 186.207, TRANSITION),
    ("Os", "Osmium", 190.23, TRANSITION),
    ("Ir", "Iridium", 192.217, TRANSITION),
    ("Pt", "Platinum", 195.084, TRANSITION),
    ("Au", "Gold", 196.967, TRANSITION),
    ("Hg", "Mercury", 200.592, TRANSITION),
    ("Tl", "Thallium", 204.383, POST_TRANSITION),
    ("Pb", "Lead", 207.2, POST_TRANSITION),
    ("Bi", "Bismuth", 208.980, POST_TRANSITION),
    ("Po", "Polonium", 209.0, POST_TRANSITION),
    ("At", "Astatine", 210.0, HALOGEN),
    ("Rn", "Radon", 222.0, NOBLE_GAS),
    ("Fr", "Francium", 223.0, ALKALI),
    ("Ra", "Radium", 226.0, ALKALINE),
    ("Ac", "Actinium", 227.0, ACTINIDE),
    ("Th", "Thorium", 232.038, ACTINIDE),
    ("Pa", "Protactinium", 231.036, ACTINIDE),
    ("U", "Uranium", 238.029, ACTINIDE),
    ("Np", "Neptunium", 237.0, ACTINIDE),
    ("Pu", "Plutonium", 244.0, ACTINIDE),
    ("Am", "Americium", 243.0, ACTINIDE),
    ("Cm", "Curium", 247.0, ACTINIDE),
    ("Bk", "Berkelium", 247.0, ACTINIDE),
    ("Cf", "Californium", 251.0, ACTINIDE),
    ("Es", "Einsteinium", 252.0, ACTINIDE),
    ("Fm", "Fermium", 257.0, ACTINIDE),
    ("Md", "Mendelevium", 258.0, ACTINIDE),
    ("No", "Nobelium", 259.0, ACTINIDE),
    ("Lr", "Lawrencium", 266.0, ACTINIDE),
    ("Rf", "Rutherfordium", 267.0, TRANSITION),
    ("Db", "Dubnium", 268.0, TRANSITION),
    ("Sg", "Seaborgium", 269.0, TRANSITION),
    ("Bh", "Bohrium", 270.0, TRANSITION),
    ("Hs", "Hassium", 269.0, TRANSITION),
    ("Mt", "Meitnerium", 278.0, TRANSITION),
    ("Ds", "Darmstadtium", 281.0, TRANSITION),
    ("Rg", "Roentgenium", 282.0, TRANSITION),
    ("Cn", "Copernicium", 285.0, TRANSITION),
    ("Nh", "Nihonium", 286.0, POST_TRANSITION),
    ("Fl", "Flerovium", 289.0, POST_TRANSITION),
    ("Mc", "Moscovium", 290.0, POST_TRANSITION),
    ("Lv", "Livermorium", 293.0, POST_TRANSITION),
    ("Ts", "Tennessine", 294.0, HALOGEN),
    ("Og", "Oganesson", 294.0, NOBLE_GAS),
)


class StaticPeriodicTable(ElementProvider):
    """In-memory periodic table built once from a fixed list of elements."""

    def __init__(self, elements: Iterable[Element]):
        self._elements: Dict[str, Element] = {element.symbol: element for element in elements}

    @classmethod
    def standard(cls) -> "StaticPeriodicTable":
        return cls(
            Element(symbol, name, number, mass, category)
            for number, (symbol, name, mass, category) in enumerate(_ELEMENT_ROWS, start=1)
        )

    def get(self, symbol: str) -> Optional[Element]:
        return self._elements.get(symbol)

    def __iter__(self) -> Iterator[Element]:
        return iter(sorted(self._elements.values(), key=lambda element: element.atomic_number))

    def __len__(self) -> int:
        return len(self._elements)


PERIODIC_TABLE = StaticPeriodicTable.standard()
