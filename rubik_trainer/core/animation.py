# rubik_trainer/core/animation.py
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Literal, Optional

from rubik_trainer import config
from rubik_trainer.core.cube_state import CubeState
from rubik_trainer.core.timeline import Timeline
from rubik_trainer.logic.moves import face_of, modifier_of, normalize_token

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

Axis = Literal["x", "y", "z"]
CommitListener = Callable[[str, CubeState], None]

# Signo visual de un giro horario por cara. Es empírico (así se ve bien en
# el render 3D); el motor combinatorio no lo usa.
VISUAL_SIGN: Dict[str, int] = {
    "R": -1,
    "U": -1,
    "F": -1,
    "L": +1,
    "D": +1,
    "B": +1,
}

ROTATION_AXIS: Dict[str, Axis] = {
    "R": "x",
    "L": "x",
    "U": "y",
    "D": "y",
    "F": "z",
    "B": "z",
}


class Phase(enum.Enum):
    IDLE = "idle"
    ANIMATING = "animating"
    COMMIT_PENDING = "commit_pending"


@dataclass
class AnimationState:
    """Estado transitorio de un giro en curso (solo lo lee el render)."""

    move: str
    face: str
    axis: Axis
    current_angle: float
    target_angle: float
    elapsed: float = 0.0

    @property
    def progress(self) -> float:
        """Fracción completada del giro, en [0, 1]."""
        if self.target_angle == 0:
            return 1.0
        return min(1.0, abs(self.current_angle) / abs(self.target_angle))


def target_angle_for(move: str) -> float:
    """Ángulo objetivo (con signo) de la animación de un movimiento.

    Magnitud 90 para cuartos de vuelta y 180 para medias vueltas; el signo
    sale de `VISUAL_SIGN` y se invierte para los antihorarios.

    Raises:
        ValueError: Si el movimiento no es válido.
    """
    move = normalize_token(move)
    if not move:
        raise ValueError("Movimiento vacío")
    suffix = modifier_of(move)
    sign = VISUAL_SIGN[face_of(move)]

    magnitude = config.QUARTER_TURN_DEG
    if suffix == "2":
        magnitude = config.HALF_TURN_DEG
    elif suffix == "'":
        sign *= -1
    return sign * magnitude


class MoveAnimator:
    """Coordinador de animación: deja pasar un solo movimiento a la vez al Timeline.

    Estados:
        IDLE -> (request_move) -> ANIMATING -> (tick hasta el objetivo)
        -> COMMIT_PENDING -> (Timeline.commit) -> IDLE

    - Un `request_move` fuera de IDLE se descarta en silencio (no hay cola).
    - Un giro iniciado siempre termina y se confirma; no hay cancelación.
    - El Timeline solo ve estados completos; los ángulos intermedios viven en
      `animation` mientras dura el giro.
    """

    def __init__(self, timeline: Timeline, step: float = config.DEFAULT_ANGLE_STEP) -> None:
        """Crea el coordinador sobre un Timeline.

        Args:
            timeline: Historial dueño de los estados del cubo.
            step: Grados que avanza el giro en cada tick.
        """
        if step <= 0:
            raise ValueError("step debe ser mayor que 0.")
        self.timeline: Timeline = timeline
        self.step: float = step
        self._phase: Phase = Phase.IDLE
        self._animation: Optional[AnimationState] = None
        self._listeners: List[CommitListener] = []

    # --------------------------
    # Consultas
    # --------------------------
    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def animating(self) -> bool:
        return self._phase is not Phase.IDLE

    @property
    def animation(self) -> Optional[AnimationState]:
        return self._animation

    def add_commit_listener(self, listener: CommitListener) -> None:
        """Registra un callback `(move, nuevo_estado)` que corre tras cada commit, ya en IDLE."""
        self._listeners.append(listener)

    def remove_commit_listener(self, listener: CommitListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --------------------------
    # Transiciones
    # --------------------------
    def request_move(self, move: str) -> bool:
        """Inicia la animación de `move` si el coordinador está libre.

        Args:
            move: Movimiento a animar.

        Returns:
            True si se aceptó; False si había otro giro en vuelo (ocupado).

        Raises:
            ValueError: Si `move` no es válido.
        """
        if self._phase is not Phase.IDLE:
            logger.debug("request_move(%s) descartado: %s", move, self._phase.value)
            return False

        move = normalize_token(move)
        target = target_angle_for(move)
        face = face_of(move)
        self._animation = AnimationState(
            move=move,
            face=face,
            axis=ROTATION_AXIS[face],
            current_angle=0.0,
            target_angle=target,
        )
        self._phase = Phase.ANIMATING
        return True

    def tick(self, dt: float = 0.0) -> Optional[CubeState]:
        """Avanza el giro en curso un paso fijo.

        Al alcanzar (o pasar) el objetivo, fija el ángulo, pasa a COMMIT_PENDING
        y confirma el movimiento en el Timeline en la misma llamada.

        Args:
            dt: Tiempo transcurrido desde el tick anterior (solo se acumula en
                `animation.elapsed`; el paso angular es fijo).

        Returns:
            El nuevo estado si este tick confirmó el movimiento; None si no.
        """
        anim = self._animation
        if self._phase is not Phase.ANIMATING or anim is None:
            return None

        anim.elapsed += dt
        direction = 1.0 if anim.target_angle >= 0 else -1.0
        anim.current_angle += direction * self.step

        if abs(anim.current_angle) < abs(anim.target_angle):
            return None

        anim.current_angle = anim.target_angle
        self._phase = Phase.COMMIT_PENDING
        return self._commit()

    def _commit(self) -> CubeState:
        anim = self._animation
        assert anim is not None
        move = anim.move
        new_state = self.timeline.commit(move)
        logger.debug("Commit %s (historial=%d, cursor=%d)", move, len(self.timeline), self.timeline.cursor)

        self._animation = None
        self._phase = Phase.IDLE

        for listener in list(self._listeners):
            listener(move, new_state)
        return new_state
