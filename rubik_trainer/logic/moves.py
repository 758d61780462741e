# rubik_trainer/logic/moves.py
from __future__ import annotations

from typing import Iterable, List, Literal, Set

Modifier = Literal["", "'", "2"]

FACES: List[str] = ["U", "D", "F", "B", "L", "R"]
SUFFIXES: List[str] = ["", "'", "2"]

VALID_FACES: Set[str] = set(FACES)
VALID_SUFFIX: Set[str] = set(SUFFIXES)

# Alfabeto completo: 6 caras x {CW, CCW, 180}.
ALL_MOVES: List[str] = [f + s for f in FACES for s in SUFFIXES]
_MOVE_SET: Set[str] = set(ALL_MOVES)


def is_valid_move(tok: str) -> bool:
    """Indica si `tok` pertenece exactamente al alfabeto de 18 movimientos."""
    return tok in _MOVE_SET


def face_of(move: str) -> str:
    """Cara que gira un movimiento (ej: "R'" -> "R")."""
    return move[0]


def modifier_of(move: str) -> Modifier:
    """Sufijo del movimiento: "" (horario), "'" (antihorario) o "2" (180°)."""
    return move[1:]  # type: ignore[return-value]


def normalize_token(tok: str) -> str:
    """Normaliza un token de movimiento a un formato estándar.

    Reglas principales:
    - Elimina espacios y convierte comilla tipográfica (’ o ‘) a comilla simple (').
    - Acepta notación de una cara con sufijo opcional ("", "'", "2").
    - Corrige el caso típico "D2'" -> "D2" (el inverso de un 180° es el mismo).

    Args:
        tok: Token de movimiento (por ejemplo: "R", "U'", "F2", "D2'").

    Returns:
        Token normalizado. Un token vacío devuelve "".

    Raises:
        ValueError: Si la cara no es válida o si el sufijo no es válido.
    """
    tok = tok.strip().replace("’", "'").replace("‘", "'")
    if not tok:
        return ""

    base = tok[0]
    suf = tok[1:]

    if base not in VALID_FACES:
        raise ValueError(f"Movimiento inválido: {tok}")

    if suf == "2'":
        suf = "2"

    if suf not in VALID_SUFFIX:
        raise ValueError(f"Sufijo inválido en: {tok}")

    return base + suf


def inverse_move(m: str) -> str:
    """Devuelve el movimiento inverso de un token.

    Ejemplos:
        - "R"  -> "R'"
        - "R'" -> "R"
        - "R2" -> "R2"

    Raises:
        ValueError: Si `m` no es un token válido.
    """
    m = normalize_token(m)
    if not m:
        return m

    suf = modifier_of(m)
    if suf == "":
        return m + "'"
    if suf == "'":
        return face_of(m)
    return m


def inverse_sequence(seq: Iterable[str]) -> List[str]:
    """Calcula la secuencia inversa: orden invertido y cada movimiento invertido.

    Aplicar `seq` y luego `inverse_sequence(seq)` deja cualquier estado igual
    al original, sticker por sticker.

    Args:
        seq: Secuencia de movimientos.

    Returns:
        Lista del mismo largo con los inversos en orden inverso.
    """
    return [inverse_move(m) for m in reversed(list(seq))]


def parse_sequence(text: str) -> List[str]:
    """Convierte una secuencia escrita como texto en movimientos normalizados (estricto).

    Args:
        text: Secuencia separada por espacios, ej: "R U R' U'".

    Returns:
        Lista de tokens normalizados, en el mismo orden.

    Raises:
        ValueError: Si algún token es inválido.
    """
    return [normalize_token(t) for t in text.split() if t.strip()]


def parse_algorithm(text: str) -> List[str]:
    """Parser permisivo de algoritmos escritos a mano.

    Separa por espacios en blanco y descarta en silencio cualquier token que no
    sea exactamente uno de los 18 movimientos. Quien necesite validación
    estricta debe usar `parse_sequence` o `is_valid_move`.

    Args:
        text: Texto libre, ej: "R U x R' U'".

    Returns:
        Solo los tokens válidos, en orden (ej: ["R", "U", "R'", "U'"]).
    """
    return [t for t in text.split() if t in _MOVE_SET]
