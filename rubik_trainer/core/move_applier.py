# rubik_trainer/core/move_applier.py
"""Aplicador de movimientos: (estado, movimiento) -> estado nuevo.

Toda la lógica de giro es declarativa:

- `FACE_PERMUTATIONS`: cómo se reordenan los 9 stickers de la cara que gira.
- `ADJACENT_RINGS`: para cada cara, el anillo de 12 stickers vecinos
  (4 caras x 3 índices), en orden cíclico. Un giro horario hace
  `nuevo[anillo[k]] = viejo[anillo[k + 1]]`.

Convención de layout (coincide con el render 2D/3D):
    - U visto desde arriba con B arriba: U[6..8] es la fila que toca F.
    - F, R, B, L vistos de frente: la fila 0 toca U.
    - D visto desde abajo con F arriba: D[0..2] es la fila que toca F.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from rubik_trainer.core.cube_state import CubeState
from rubik_trainer.logic.moves import face_of, modifier_of, normalize_token

Strip = Tuple[str, Tuple[int, int, int]]

# nuevo[i] = viejo[perm[i]]
ROTATE_CW: Tuple[int, ...] = (6, 3, 0, 7, 4, 1, 8, 5, 2)
ROTATE_CCW: Tuple[int, ...] = (2, 5, 8, 1, 4, 7, 0, 3, 6)
ROTATE_HALF: Tuple[int, ...] = (8, 7, 6, 5, 4, 3, 2, 1, 0)

FACE_PERMUTATIONS: Dict[str, Tuple[int, ...]] = {
    "": ROTATE_CW,
    "'": ROTATE_CCW,
    "2": ROTATE_HALF,
}

# Cuántas posiciones avanza el anillo de vecinos por sufijo.
RING_SHIFT: Dict[str, int] = {
    "": 1,
    "'": 3,
    "2": 2,
}

ADJACENT_RINGS: Dict[str, Tuple[Strip, Strip, Strip, Strip]] = {
    "U": (("F", (0, 1, 2)), ("R", (0, 1, 2)), ("B", (0, 1, 2)), ("L", (0, 1, 2))),
    "D": (("F", (6, 7, 8)), ("L", (6, 7, 8)), ("B", (6, 7, 8)), ("R", (6, 7, 8))),
    "F": (("U", (6, 7, 8)), ("L", (8, 5, 2)), ("D", (2, 1, 0)), ("R", (0, 3, 6))),
    "B": (("U", (0, 1, 2)), ("R", (2, 5, 8)), ("D", (8, 7, 6)), ("L", (6, 3, 0))),
    "L": (("U", (0, 3, 6)), ("B", (8, 5, 2)), ("D", (0, 3, 6)), ("F", (0, 3, 6))),
    "R": (("U", (2, 5, 8)), ("F", (2, 5, 8)), ("D", (2, 5, 8)), ("B", (6, 3, 0))),
}


def _cycle_ring(faces: Dict[str, List[str]], ring: Tuple[Strip, ...], shift: int) -> None:
    """Rota el anillo de 12 stickers vecinos `shift` posiciones (en sitio).

    Args:
        faces: Caras mutables (copias) del estado en construcción.
        ring: Las 4 tiras de 3 stickers, en orden cíclico.
        shift: 1 = horario, 3 = antihorario, 2 = 180°.
    """
    strips = [[faces[f][i] for i in idxs] for f, idxs in ring]
    n = len(ring)
    for k, (f, idxs) in enumerate(ring):
        src = strips[(k + shift) % n]
        for i, color in zip(idxs, src):
            faces[f][i] = color


def apply_move(state: CubeState, move: str) -> CubeState:
    """Aplica un movimiento y devuelve un estado nuevo (no modifica `state`).

    Args:
        state: Estado de partida.
        move: Uno de los 18 movimientos (ej: "R", "U'", "F2").

    Returns:
        El estado resultante.

    Raises:
        ValueError: Si `move` no pertenece al alfabeto.
    """
    move = normalize_token(move)
    if not move:
        return state

    face = face_of(move)
    suffix = modifier_of(move)

    faces: Dict[str, List[str]] = {f: list(state[f]) for f in state.FACES}

    own = state[face]
    faces[face] = [own[i] for i in FACE_PERMUTATIONS[suffix]]
    _cycle_ring(faces, ADJACENT_RINGS[face], RING_SHIFT[suffix])

    return CubeState._from_trusted({f: tuple(s) for f, s in faces.items()})


def apply_sequence(state: CubeState, moves: Iterable[str]) -> CubeState:
    """Aplica una secuencia de movimientos en orden.

    Args:
        state: Estado de partida.
        moves: Movimientos, por ejemplo ["R", "U", "R'", "U'"].

    Returns:
        El estado resultante.
    """
    for m in moves:
        state = apply_move(state, m)
    return state
