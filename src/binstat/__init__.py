"""
binstat - multidimensional binary states

Record observed states of a set of boolean actions, check that the record is
closed under every toggle it allows, and compose catalogs with symmetries.
"""

__version__ = "0.1.0"

from .kernel import (
    BinaryState,
    Catalog,
    DimensionMismatch,
    catalog_receipts,
)
from .symmetry import (
    Symmetry,
    NoSymmetry,
    ExclusiveSymmetry,
    IndependentSymmetry,
    no_symmetry,
    exclusive_symmetry,
    independent_symmetry,
    symmetry_dimensions,
)

__all__ = [
    "BinaryState",
    "Catalog",
    "DimensionMismatch",
    "catalog_receipts",
    "Symmetry",
    "NoSymmetry",
    "ExclusiveSymmetry",
    "IndependentSymmetry",
    "no_symmetry",
    "exclusive_symmetry",
    "independent_symmetry",
    "symmetry_dimensions",
]
