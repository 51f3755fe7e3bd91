"""
Symmetry Tree: composition of catalogs.

Three node shapes, each a tagged dict:
  - {"kind": "none", "catalog": Catalog}
      No new bits; refers to one catalog. Contributes len(actions) dimensions.
  - {"kind": "exclusive", "children": [...]}
      Alternative rule-sets over the same dimension slice. All children
      must have the same dimension count. Which child applies is decided
      by the caller.
  - {"kind": "independent", "children": [...]}
      Rule-sets laid out one after another; dimension counts add.

Each node owns its children. The tree has no back-edges.
"""

from typing import List, Literal, TypedDict, Union

from .kernel.catalog import Catalog, DimensionMismatch


class NoSymmetry(TypedDict):
    kind: Literal["none"]
    catalog: Catalog


class ExclusiveSymmetry(TypedDict):
    kind: Literal["exclusive"]
    children: List["Symmetry"]


class IndependentSymmetry(TypedDict):
    kind: Literal["independent"]
    children: List["Symmetry"]


Symmetry = Union[NoSymmetry, ExclusiveSymmetry, IndependentSymmetry]


def no_symmetry(catalog: Catalog) -> NoSymmetry:
    return {"kind": "none", "catalog": catalog}


def exclusive_symmetry(children: List[Symmetry]) -> ExclusiveSymmetry:
    """
    Combine alternative rule-sets that share the same dimensions.

    Raises:
        DimensionMismatch: If any child's dimension count differs from the first child's.
    """
    children = list(children)
    if children:
        expected = symmetry_dimensions(children[0])
        for child in children[1:]:
            actual = symmetry_dimensions(child)
            if actual != expected:
                raise DimensionMismatch(expected, actual)
    return {"kind": "exclusive", "children": children}


def independent_symmetry(children: List[Symmetry]) -> IndependentSymmetry:
    return {"kind": "independent", "children": list(children)}


def symmetry_dimensions(node: Symmetry) -> int:
    """
    Number of dimensions a node occupies.

    none: catalog.dimensions; exclusive: the shared count (0 when empty);
    independent: sum over children.
    """
    kind = node["kind"]
    if kind == "none":
        return node["catalog"].dimensions
    if kind == "exclusive":
        children = node["children"]
        return symmetry_dimensions(children[0]) if children else 0
    if kind == "independent":
        return sum(symmetry_dimensions(child) for child in node["children"])
    raise ValueError(f"Unknown symmetry kind: {kind!r}")
