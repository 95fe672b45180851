"""Periodic table data: symbols, names, standard atomic weights and radii."""

from __future__ import annotations

from typing import NamedTuple


class _Element(NamedTuple):
    symbol: str
    name: str
    weight: float
    radius: float  # Bragg-Slater radius in angstroms


# Index 0 is a placeholder so that the position in the table equals Z.
# Hydrogen uses the adjusted radius of 0.35 angstrom.
_PERIODIC_TABLE: tuple[_Element, ...] = tuple(
    _Element(*row)
    for row in (
        ("X", "Placeholder", 0.0, 0.0),
        ("H", "Hydrogen", 1.008, 0.35),
        ("He", "Helium", 4.002602, 1.40),
        ("Li", "Lithium", 6.94, 1.45),
        ("Be", "Beryllium", 9.0121831, 1.05),
        ("B", "Boron", 10.81, 0.85),
        ("C", "Carbon", 12.011, 0.70),
        ("N", "Nitrogen", 14.007, 0.65),
        ("O", "Oxygen", 15.999, 0.60),
        ("F", "Fluorine", 18.998403163, 0.50),
        ("Ne", "Neon", 20.1797, 1.50),
        ("Na", "Sodium", 22.98976928, 1.80),
        ("Mg", "Magnesium", 24.305, 1.50),
        ("Al", "Aluminium", 26.9815384, 1.25),
        ("Si", "Silicon", 28.085, 1.10),
        ("P", "Phosphorus", 30.973761998, 1.00),
        ("S", "Sulfur", 32.06, 1.00),
        ("Cl", "Chlorine", 35.45, 1.00),
        ("Ar", "Argon", 39.948, 1.80),
        ("K", "Potassium", 39.0983, 2.20),
        ("Ca", "Calcium", 40.078, 1.80),
        ("Sc", "Scandium", 44.955908, 1.60),
        ("Ti", "Titanium", 47.867, 1.40),
        ("V", "Vanadium", 50.9415, 1.35),
        ("Cr", "Chromium", 51.9961, 1.40),
        ("Mn", "Manganese", 54.938043, 1.40),
        ("Fe", "Iron", 55.845, 1.40),
        ("Co", "Cobalt", 58.933194, 1.35),
        ("Ni", "Nickel", 58.6934, 1.35),
        ("Cu", "Copper", 63.546, 1.35),
        ("Zn", "Zinc", 65.38, 1.35),
        ("Ga", "Gallium", 69.723, 1.30),
        ("Ge", "Germanium", 72.630, 1.25),
        ("As", "Arsenic", 74.921595, 1.15),
        ("Se", "Selenium", 78.971, 1.15),
        ("Br", "Bromine", 79.904, 1.15),
        ("Kr", "Krypton", 83.798, 1.90),
        ("Rb", "Rubidium", 85.4678, 2.35),
        ("Sr", "Strontium", 87.62, 2.00),
        ("Y", "Yttrium", 88.90584, 1.80),
        ("Zr", "Zirconium", 91.224, 1.55),
        ("Nb", "Niobium", 92.90637, 1.45),
        ("Mo", "Molybdenum", 95.95, 1.45),
        ("Tc", "Technetium", 97.90721, 1.35),
        ("Ru", "Ruthenium", 101.07, 1.30),
        ("Rh", "Rhodium", 102.90549, 1.35),
        ("Pd", "Palladium", 106.42, 1.40),
        ("Ag", "Silver", 107.8682, 1.60),
        ("Cd", "Cadmium", 112.414, 1.55),
        ("In", "Indium", 114.818, 1.55),
        ("Sn", "Tin", 118.710, 1.45),
        ("Sb", "Antimony", 121.760, 1.45),
        ("Te", "Tellurium", 127.60, 1.40),
        ("I", "Iodine", 126.90447, 1.40),
        ("Xe", "Xenon", 131.293, 2.10),
        ("Cs", "Caesium", 132.90545196, 2.60),
        ("Ba", "Barium", 137.327, 2.15),
        ("La", "Lanthanum", 138.90547, 1.95),
        ("Ce", "Cerium", 140.116, 1.85),
        ("Pr", "Praseodymium", 140.90766, 1.85),
        ("Nd", "Neodymium", 144.242, 1.85),
        ("Pm", "Promethium", 144.91276, 1.85),
        ("Sm", "Samarium", 150.36, 1.85),
        ("Eu", "Europium", 151.964, 1.85),
        ("Gd", "Gadolinium", 157.25, 1.80),
        ("Tb", "Terbium", 158.925354, 1.75),
        ("Dy", "Dysprosium", 162.500, 1.75),
        ("Ho", "Holmium", 164.930328, 1.75),
        ("Er", "Erbium", 167.259, 1.75),
        ("Tm", "Thulium", 168.934218, 1.75),
        ("Yb", "Ytterbium", 173.045, 1.75),
        ("Lu", "Lutetium", 174.9668, 1.75),
        ("Hf", "Hafnium", 178.49, 1.55),
        ("Ta", "Tantalum", 180.94788, 1.45),
        ("W", "Tungsten", 183.84, 1.35),
        ("Re", "Rhenium", 186.207, 1.35),
        ("Os", "Osmium", 190.23, 1.30),
        ("Ir", "Iridium", 192.217, 1.35),
        ("Pt", "Platinum", 195.084, 1.35),
        ("Au", "Gold", 196.966570, 1.35),
        ("Hg", "Mercury", 200.592, 1.50),
        ("Tl", "Thallium", 204.38, 1.90),
        ("Pb", "Lead", 207.2, 1.80),
        ("Bi", "Bismuth", 208.98040, 1.60),
        ("Po", "Polonium", 208.98243, 1.90),
        ("At", "Astatine", 209.98715, 1.45),
        ("Rn", "Radon", 222.01758, 2.10),
        ("Fr", "Francium", 223.01974, 1.80),
        ("Ra", "Radium", 226.02541, 2.15),
        ("Ac", "Actinium", 227.02775, 1.95),
        ("Th", "Thorium", 232.0377, 1.80),
        ("Pa", "Protactinium", 231.03588, 1.80),
        ("U", "Uranium", 238.02891, 1.75),
        ("Np", "Neptunium", 237.04817, 1.75),
        ("Pu", "Plutonium", 244.06421, 1.75),
        ("Am", "Americium", 243.06138, 1.75),
        ("Cm", "Curium", 247.07035, 1.75),
        ("Bk", "Berkelium", 247.07031, 1.75),
        ("Cf", "Californium", 251.07959, 1.75),
        ("Es", "Einsteinium", 252.0830, 1.75),
        ("Fm", "Fermium", 257.09511, 1.75),
        ("Md", "Mendelevium", 258.09843, 1.75),
        ("No", "Nobelium", 259.1010, 1.75),
        ("Lr", "Lawrencium", 262.110, 1.75),
        ("Rf", "Rutherfordium", 267.122, 1.75),
        ("Db", "Dubnium", 268.126, 1.75),
        ("Sg", "Seaborgium", 271.134, 1.75),
        ("Bh", "Bohrium", 270.133, 1.75),
        ("Hs", "Hassium", 269.1338, 1.75),
        ("Mt", "Meitnerium", 278.156, 1.75),
        ("Ds", "Darmastadtium", 281.165, 1.75),
        ("Rg", "Roentgenium", 281.166, 1.75),
        ("Cn", "Copernicium", 285.177, 1.75),
        ("Nh", "Nihonium", 286.182, 1.75),
        ("Fl", "Flerovium", 289.190, 1.75),
        ("Mc", "Moscovium", 289.194, 1.75),
        ("Lv", "Livermorium", 293.204, 1.75),
        ("Ts", "Tennessine", 293.208, 1.75),
        ("Og", "Oganesson", 294.214, 1.75),
    )
)

ELEMENTS: tuple[str, ...] = tuple(element.symbol for element in _PERIODIC_TABLE)
ATOMIC_NAMES: tuple[str, ...] = tuple(element.name for element in _PERIODIC_TABLE)
STANDARD_ATOMIC_WEIGHTS: tuple[float, ...] = tuple(element.weight for element in _PERIODIC_TABLE)
BRAGG_SLATER_RADII: tuple[float, ...] = tuple(element.radius for element in _PERIODIC_TABLE)

# Number of STO-3G atomic orbitals, as (first Z, last Z, count) ranges.
_STO_3G_RANGES = (
    (1, 2, 1),
    (3, 10, 5),
    (11, 18, 9),
    (19, 20, 13),
    (21, 36, 19),
    (37, 38, 23),
    (39, 54, 29),
)

STO_3G_ATOMIC_ORBITAL_COUNT: tuple[int, ...] = (0,) + tuple(
    count for first, last, count in _STO_3G_RANGES for _ in range(first, last + 1)
)

_SYMBOL_TO_NUM = {symbol: z for z, symbol in enumerate(ELEMENTS)}


def atomic_symbol_to_num(symbol: str) -> int:
    """Return the atomic number for an element symbol, or 0 if it is unknown."""
    return _SYMBOL_TO_NUM.get(symbol, 0)


def atomic_num_to_mass(atomic_num: int) -> float:
    """Return the standard atomic weight for an atomic number."""
    if not 0 <= atomic_num < len(STANDARD_ATOMIC_WEIGHTS):
        raise ValueError(f"atomic number out of range: {atomic_num}")
    return STANDARD_ATOMIC_WEIGHTS[atomic_num]