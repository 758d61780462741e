# rubik_trainer/app/animation_driver.py
from __future__ import annotations

import logging
import time
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from rubik_trainer import config
from rubik_trainer.app.session import TrainerSession
from rubik_trainer.core.cube_state import CubeState

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class AnimationDriver(QObject):
    """Timer de Qt que alimenta los ticks de animación de una `TrainerSession`.

    El timer corre solo mientras hay un giro en curso; al confirmarse el último
    movimiento (y sin reproducción pendiente) se detiene solo.

    Signals:
        frame(str, float): Movimiento en vuelo y ángulo actual, en cada tick.
        move_committed(str): Movimiento confirmado en el historial.
        idle(): El animador quedó libre y no hay nada más que reproducir.
    """

    frame = Signal(str, float)
    move_committed = Signal(str)
    idle = Signal()

    def __init__(
        self,
        session: TrainerSession,
        interval_ms: int = config.TICK_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        """Crea el driver y conecta el timer.

        Args:
            session: Sesión a animar.
            interval_ms: Intervalo entre ticks (~60fps por defecto).
            parent: QObject padre, opcional.
        """
        super().__init__(parent)
        self.session: TrainerSession = session
        self._last_tick: Optional[float] = None

        self._timer: QTimer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_tick)

        self.session.animator.add_commit_listener(self._on_commit)

    @property
    def running(self) -> bool:
        return self._timer.isActive()

    def request_move(self, move: str) -> bool:
        """Pide un giro y arranca el timer si fue aceptado."""
        accepted = self.session.request_move(move)
        if accepted:
            self._start()
        return accepted

    def play(self) -> None:
        """Reproduce el algoritmo seleccionado en la sesión."""
        self.session.play()
        if self.session.animating:
            self._start()

    def stop(self) -> None:
        """Detiene el timer (el giro en vuelo queda congelado hasta el próximo `_start`)."""
        self._timer.stop()
        self._last_tick = None

    def _start(self) -> None:
        if not self._timer.isActive():
            self._last_tick = time.monotonic()
            self._timer.start()

    def _on_tick(self) -> None:
        """Tick del timer: avanza la animación de la sesión un paso."""
        now = time.monotonic()
        dt = 0.0 if self._last_tick is None else now - self._last_tick
        self._last_tick = now

        if not self.session.animating:
            self.stop()
            self.idle.emit()
            return

        self.session.tick(dt)

        anim = self.session.animation
        if anim is not None:
            self.frame.emit(anim.move, anim.current_angle)
        elif not self.session.animating:
            self.stop()
            self.idle.emit()

    def _on_commit(self, move: str, state: CubeState) -> None:
        self.move_committed.emit(move)
