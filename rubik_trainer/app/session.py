# rubik_trainer/app/session.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from rubik_trainer import config
from rubik_trainer.core.animation import AnimationState, MoveAnimator
from rubik_trainer.core.cube_state import CubeState
from rubik_trainer.core.move_applier import apply_sequence
from rubik_trainer.core.timeline import Timeline
from rubik_trainer.logic.algorithms import ALGORITHMS, Algorithm, get_algorithm
from rubik_trainer.logic.moves import inverse_sequence
from rubik_trainer.logic.scramble import generate_scramble

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class TrainerSession:
    """Sesión del entrenador: coordina historial, animación y reproducción.

    Esta clase coordina:
    - El historial de estados (`Timeline`), único dueño de los snapshots.
    - El coordinador de animación (`MoveAnimator`), que deja pasar un
      movimiento a la vez.
    - Las acciones de alto nivel (scramble, reset, rewind, saltos en el
      historial) y la reproducción paso a paso de un algoritmo.

    Las acciones de alto nivel se ignoran mientras hay un giro en vuelo, así
    nunca se saltean la disciplina de commit del animador.
    """

    def __init__(
        self,
        initial: Optional[CubeState] = None,
        speed_ms: int = config.DEFAULT_ANIMATION_SPEED_MS,
    ) -> None:
        """Crea la sesión.

        Args:
            initial: Estado inicial (por defecto el cubo resuelto).
            speed_ms: Duración de cada giro en ms durante la reproducción.
        """
        self.timeline: Timeline = Timeline(initial)
        self.animator: MoveAnimator = MoveAnimator(self.timeline)
        self.animator.add_commit_listener(self._on_commit)

        # --- Reproducción ---
        self.selected_algorithm: Optional[Algorithm] = ALGORITHMS[0] if ALGORITHMS else None
        self.current_moves: List[str] = list(self.selected_algorithm.moves) if self.selected_algorithm else []
        self.current_move_index: int = 0
        self.is_playing: bool = False
        self.speed_ms: int = speed_ms
        self.set_speed(speed_ms)

        self.last_scramble: List[str] = []

    # -------------------
    # Lectura
    # -------------------
    @property
    def cube(self) -> CubeState:
        return self.timeline.current

    @property
    def executed_moves(self) -> List[str]:
        return self.timeline.executed_moves

    @property
    def animating(self) -> bool:
        return self.animator.animating

    @property
    def animation(self) -> Optional[AnimationState]:
        return self.animator.animation

    @property
    def is_solved(self) -> bool:
        return self.timeline.current.is_solved()

    # -------------------
    # Helpers
    # -------------------
    def _busy(self, action: str) -> bool:
        if self.animator.animating:
            logger.debug("%s ignorado: hay un giro en curso", action)
            return True
        return False

    def _stop_playback(self) -> None:
        self.current_move_index = 0
        self.is_playing = False

    def _on_commit(self, move: str, state: CubeState) -> None:
        if state.is_solved():
            logger.info("Cubo resuelto tras %s", move)
        if self.is_playing:
            self.execute_next_move()

    # -------------------
    # Movimientos
    # -------------------
    def request_move(self, move: str) -> bool:
        """Pide un giro animado. Devuelve False si el animador está ocupado."""
        return self.animator.request_move(move)

    def tick(self, dt: float = 0.0) -> Optional[CubeState]:
        """Avanza un frame de animación (ver `MoveAnimator.tick`)."""
        return self.animator.tick(dt)

    def jump(self, index: int) -> bool:
        """Salta a una entrada del historial (no-op si está fuera de rango)."""
        if self._busy("jump"):
            return False
        return self.timeline.jump(index)

    def undo(self) -> bool:
        if self._busy("undo"):
            return False
        return self.timeline.undo()

    def redo(self) -> bool:
        if self._busy("redo"):
            return False
        return self.timeline.redo()

    # -------------------
    # Acciones de alto nivel
    # -------------------
    def scramble(self, length: int = config.DEFAULT_SCRAMBLE_LENGTH, seed: Optional[int] = None) -> List[str]:
        """Mezcla un cubo resuelto y reinicia el historial en el estado mezclado.

        Args:
            length: Cantidad de movimientos del scramble.
            seed: Semilla opcional (scramble reproducible).

        Returns:
            La secuencia aplicada (vacía si la acción se ignoró por estar ocupado).
        """
        if self._busy("scramble"):
            return []
        seq = generate_scramble(length, seed)
        self.timeline.scramble(apply_sequence(CubeState.solved(), seq))
        self.last_scramble = seq
        self._stop_playback()
        logger.info("Scramble: %s", " ".join(seq))
        return seq

    def reset(self) -> bool:
        """Vuelve al cubo resuelto con un historial nuevo."""
        if self._busy("reset"):
            return False
        self.timeline.reset(CubeState.solved())
        self.last_scramble = []
        self._stop_playback()
        logger.info("Reset")
        return True

    def rewind(self) -> bool:
        """Deshace todos los movimientos ejecutados aplicando su inversa.

        El historial se reinicia con una sola raíz en el estado resultante.
        """
        if self._busy("rewind"):
            return False
        inverse = inverse_sequence(self.timeline.executed_moves)
        state = apply_sequence(self.timeline.current, inverse)
        self.timeline.reset(state)
        self._stop_playback()
        logger.info("Rewind (%d movimientos)", len(inverse))
        return True

    # -------------------
    # Reproducción de algoritmos
    # -------------------
    def select_algorithm(self, algorithm: Union[Algorithm, str, Sequence[str]]) -> bool:
        """Selecciona el algoritmo a reproducir.

        Args:
            algorithm: Un `Algorithm`, su id en el catálogo o una lista de movimientos.

        Returns:
            False si el id no existe o hay un giro en curso.
        """
        if self._busy("select_algorithm"):
            return False
        if isinstance(algorithm, Algorithm):
            alg: Optional[Algorithm] = algorithm
            moves = list(algorithm.moves)
        elif isinstance(algorithm, str):
            alg = get_algorithm(algorithm)
            if alg is None:
                logger.warning("Algoritmo desconocido: %s", algorithm)
                return False
            moves = list(alg.moves)
        else:
            alg = None
            moves = list(algorithm)

        self.selected_algorithm = alg
        self.current_moves = moves
        self._stop_playback()
        return True

    def execute_next_move(self) -> bool:
        """Pide el siguiente movimiento del algoritmo seleccionado.

        Returns:
            True si se inició un giro; False si ya no quedan movimientos
            (la reproducción se detiene) o el animador estaba ocupado.
        """
        if self.current_move_index >= len(self.current_moves):
            self.is_playing = False
            return False
        move = self.current_moves[self.current_move_index]
        if not self.animator.request_move(move):
            return False
        self.current_move_index += 1
        return True

    def play(self) -> None:
        """Reproduce el algoritmo seleccionado desde el índice actual (o desde 0 si terminó)."""
        if self.current_move_index >= len(self.current_moves):
            self.current_move_index = 0
        self.is_playing = True
        if not self.animator.animating:
            self.execute_next_move()

    def pause(self) -> None:
        """Pausa la reproducción; el giro en vuelo (si lo hay) termina igual."""
        self.is_playing = False

    def set_speed(self, speed_ms: int) -> None:
        """Ajusta la duración de cada giro (ms por movimiento de un cuarto de vuelta).

        Raises:
            ValueError: Si `speed_ms` no es positivo.
        """
        if speed_ms <= 0:
            raise ValueError("speed_ms debe ser mayor que 0.")
        self.speed_ms = speed_ms
        ticks = max(1.0, speed_ms / float(config.TICK_INTERVAL_MS))
        self.animator.step = config.QUARTER_TURN_DEG / ticks
