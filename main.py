# main.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from PySide6.QtCore import QCoreApplication, QTimer

from rubik_trainer import config
from rubik_trainer.app.animation_driver import AnimationDriver
from rubik_trainer.app.session import TrainerSession
from rubik_trainer.logic.moves import parse_algorithm

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger("main")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Entrenador de cubo Rubik (modo sin ventana).")
    parser.add_argument("algorithm", nargs="?", default="R U R' U'",
                        help="Secuencia a reproducir, ej: \"R U R' U'\" (los tokens inválidos se ignoran).")
    parser.add_argument("--scramble", type=int, default=0,
                        help="Mezclar con N movimientos antes de reproducir.")
    parser.add_argument("--speed", type=int, default=config.DEFAULT_ANIMATION_SPEED_MS,
                        help="ms por movimiento.")
    parser.add_argument("--debug", action="store_true", help="Logging detallado.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> NoReturn:
    """Punto de entrada de la aplicación.

    Crea la instancia de `QCoreApplication`, arma la sesión y el driver de
    animación, reproduce el algoritmo pedido y termina cuando el animador
    queda libre.

    Returns:
        No retorna (finaliza el proceso con `sys.exit`).
    """
    args = _parse_args(argv)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Modo debug activado.")

    app = QCoreApplication(sys.argv[:1])
    session = TrainerSession(speed_ms=args.speed)
    driver = AnimationDriver(session)

    if args.scramble:
        session.scramble(args.scramble)

    moves = parse_algorithm(args.algorithm)
    logger.info("Reproduciendo: %s", " ".join(moves) or "(nada)")
    session.select_algorithm(moves)

    driver.move_committed.connect(lambda mv: logger.info("Movimiento aplicado: %s", mv))

    def _finish() -> None:
        logger.info("Estado final: %s", session.cube)
        logger.info("Resuelto: %s", "sí" if session.is_solved else "no")
        app.quit()

    driver.idle.connect(_finish)
    if moves:
        driver.play()
    else:
        QTimer.singleShot(0, _finish)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
