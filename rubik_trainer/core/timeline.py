# rubik_trainer/core/timeline.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from rubik_trainer.core.cube_state import CubeState
from rubik_trainer.core.move_applier import apply_move
from rubik_trainer.logic.moves import inverse_move

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class HistoryEntry:
    """Snapshot confirmado del cubo y el movimiento que lo produjo (None en la raíz)."""

    state: CubeState
    move: Optional[str] = None


class Timeline:
    """Historial de snapshots con cursor navegable.

    Invariantes:
        - `entries[0].move is None` (raíz).
        - `0 <= cursor < len(entries)`.
        - `current` siempre es `entries[cursor].state`.

    `commit` descarta todo lo que esté después del cursor antes de agregar
    (al confirmar un movimiento tras volver atrás, el redo se pierde).
    `jump` solo mueve el cursor: expone el snapshot guardado, sin re-aplicar
    movimientos.
    """

    def __init__(self, root: Optional[CubeState] = None) -> None:
        self._entries: List[HistoryEntry] = []
        self._cursor: int = 0
        self.reset(root if root is not None else CubeState.solved())

    # --------------------------
    # Mutadores
    # --------------------------
    def commit(self, move: str) -> CubeState:
        """Aplica `move` al estado actual y lo agrega como nueva entrada.

        Args:
            move: Movimiento a confirmar.

        Returns:
            El nuevo estado actual.
        """
        new_state = apply_move(self.current, move)
        dropped = len(self._entries) - (self._cursor + 1)
        if dropped:
            logger.debug("Commit %s descarta %d entradas de redo", move, dropped)
        del self._entries[self._cursor + 1:]
        self._entries.append(HistoryEntry(new_state, move))
        self._cursor = len(self._entries) - 1
        return new_state

    def jump(self, index: int) -> bool:
        """Mueve el cursor a `index` si está en rango.

        Args:
            index: Posición destino (0 = raíz).

        Returns:
            True si el cursor se movió; False si el índice estaba fuera de rango
            (en ese caso no cambia nada).
        """
        if not 0 <= index < len(self._entries):
            logger.debug("jump(%d) ignorado: fuera de rango (len=%d)", index, len(self._entries))
            return False
        self._cursor = index
        return True

    def reset(self, seed_state: CubeState) -> None:
        """Reemplaza todo el log por una única raíz en `seed_state`."""
        self._entries = [HistoryEntry(seed_state, None)]
        self._cursor = 0

    # scramble y reset solo difieren en el estado semilla
    scramble = reset

    def undo(self) -> bool:
        return self.jump(self._cursor - 1) if self.can_undo else False

    def redo(self) -> bool:
        return self.jump(self._cursor + 1) if self.can_redo else False

    # --------------------------
    # Consultas
    # --------------------------
    @property
    def current(self) -> CubeState:
        return self._entries[self._cursor].state

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def entries(self) -> Sequence[HistoryEntry]:
        return tuple(self._entries)

    @property
    def executed_moves(self) -> List[str]:
        """Movimientos desde la raíz hasta el cursor, en orden."""
        return [e.move for e in self._entries[1:self._cursor + 1] if e.move is not None]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def __len__(self) -> int:
        return len(self._entries)

    def navigation_moves(self, target: int) -> List[str]:
        """Movimientos que llevan del cursor actual a `target`.

        Hacia adelante son los movimientos guardados tal cual; hacia atrás, los
        inversos en orden inverso. Sirve para animar un salto en el historial;
        `jump` en sí no los usa.

        Args:
            target: Índice destino.

        Returns:
            Lista de movimientos (vacía si `target` es el cursor o está fuera de rango).
        """
        if not 0 <= target < len(self._entries):
            return []

        moves: List[str] = []
        if target < self._cursor:
            for i in range(self._cursor, target, -1):
                mv = self._entries[i].move
                if mv:
                    moves.append(inverse_move(mv))
        else:
            for i in range(self._cursor + 1, target + 1):
                mv = self._entries[i].move
                if mv:
                    moves.append(mv)
        return moves
