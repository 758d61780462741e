# rubik_trainer/logic/scramble.py
from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from rubik_trainer import config
from rubik_trainer.core.cube_state import CubeState
from rubik_trainer.core.move_applier import apply_sequence
from rubik_trainer.logic.moves import FACES, SUFFIXES

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def generate_scramble(
    n: int = config.DEFAULT_SCRAMBLE_LENGTH, seed: Optional[int] = None
) -> List[str]:
    """Genera una secuencia de mezcla (scramble) aleatoria para el cubo.

    Para cada posición se sortea una cara (re-sorteando si coincide con la
    anterior) y, de forma independiente, un sufijo ("", "'" o "2").

    Args:
        n: Cantidad de movimientos a generar. 0 devuelve una lista vacía.
        seed: Semilla opcional para obtener resultados reproducibles.

    Returns:
        Lista de `n` movimientos sin dos caras iguales consecutivas,
        por ejemplo ["R", "U'", "F2", ...].

    Raises:
        ValueError: Si `n` es negativo.
    """
    if n < 0:
        raise ValueError("n no puede ser negativo.")

    rng = random.Random(seed)

    seq: List[str] = []
    last_face: Optional[str] = None

    for _ in range(n):
        face = rng.choice(FACES)
        while face == last_face:
            face = rng.choice(FACES)
        last_face = face

        seq.append(face + rng.choice(SUFFIXES))

    return seq


def scrambled_cube(
    n: int = config.DEFAULT_SCRAMBLE_LENGTH, seed: Optional[int] = None
) -> Tuple[CubeState, List[str]]:
    """Mezcla un cubo resuelto.

    Returns:
        (estado mezclado, secuencia aplicada).
    """
    seq = generate_scramble(n, seed)
    logger.debug("Scramble generado (%d): %s", n, " ".join(seq))
    return apply_sequence(CubeState.solved(), seq), seq
