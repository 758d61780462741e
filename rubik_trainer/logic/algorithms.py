# rubik_trainer/logic/algorithms.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

Category = Literal["beginner", "f2l", "oll", "pll"]


@dataclass(frozen=True)
class Algorithm:
    """Algoritmo del catálogo: el motor solo usa `moves` (lista opaca)."""

    id: str
    name: str
    description: str
    moves: Tuple[str, ...]
    category: Category


ALGORITHMS: List[Algorithm] = [
    Algorithm(
        "sexy-move",
        "Sexy Move",
        "The most fundamental algorithm. Used in many other algorithms.",
        ("R", "U", "R'", "U'"),
        "beginner",
    ),
    Algorithm(
        "sledgehammer",
        "Sledgehammer",
        "Another fundamental trigger used in F2L and other algorithms.",
        ("R'", "F", "R", "F'"),
        "beginner",
    ),
    Algorithm(
        "sune",
        "Sune",
        "One of the most important OLL algorithms. Orients 3 corners.",
        ("R", "U", "R'", "U", "R", "U2", "R'"),
        "oll",
    ),
    Algorithm(
        "anti-sune",
        "Anti-Sune",
        "The inverse of Sune. Also orients 3 corners.",
        ("R'", "U'", "R", "U'", "R'", "U2", "R"),
        "oll",
    ),
    Algorithm(
        "t-perm",
        "T-Perm",
        "A fundamental PLL algorithm. Swaps 2 corners and 2 edges.",
        ("R", "U", "R'", "U'", "R'", "F", "R2", "U'", "R'", "U'", "R", "U", "R'", "F'"),
        "pll",
    ),
    Algorithm(
        "u-perm-a",
        "U-Perm (a)",
        "Cycles 3 edges clockwise on the top layer.",
        ("R", "U'", "R", "U", "R", "U", "R", "U'", "R'", "U'", "R2"),
        "pll",
    ),
    Algorithm(
        "niklas",
        "Niklas",
        "Cycles 3 corners. Very useful for corner permutation.",
        ("R'", "U", "L'", "U2", "R", "U'", "L'"),
        "beginner",
    ),
    Algorithm(
        "double-sune",
        "Double Sune",
        "Sune performed twice. Orients all corners in some cases.",
        ("R", "U", "R'", "U", "R", "U2", "R'", "R", "U", "R'", "U", "R", "U2", "R'"),
        "oll",
    ),
]


def get_algorithm(alg_id: str) -> Optional[Algorithm]:
    """Busca un algoritmo del catálogo por id (None si no existe)."""
    for alg in ALGORITHMS:
        if alg.id == alg_id:
            return alg
    return None


def by_category(category: Category) -> List[Algorithm]:
    return [a for a in ALGORITHMS if a.category == category]
