# rubik_trainer/config.py
"""Constantes de configuración del entrenador.

Centraliza los valores por defecto usados en tiempo de ejecución (colores del
cubo resuelto, largo de scramble, velocidad de animación). Son valores de
desarrollo: la sesión y el driver de animación aceptan overrides al
construirse.
"""
from __future__ import annotations

from typing import Dict, List

# ---------------- Cubo ----------------

# Orden canónico de caras (también el orden de `CubeState.to_hashable()`).
FACE_ORDER: List[str] = ["U", "D", "F", "B", "L", "R"]

# Color de cada cara en el cubo resuelto (letras: W Y G B O R).
COLORS_SOLVED: Dict[str, str] = {
    "U": "W",
    "D": "Y",
    "F": "G",
    "B": "B",
    "L": "O",
    "R": "R",
}

# ---------------- Scramble ----------------

DEFAULT_SCRAMBLE_LENGTH: int = 15

# ---------------- Animación ----------------

# ms por movimiento durante la reproducción de un algoritmo.
DEFAULT_ANIMATION_SPEED_MS: int = 500

# Intervalo del timer de animación (~60fps).
TICK_INTERVAL_MS: int = 16

# Grados que avanza un giro en cada tick.
DEFAULT_ANGLE_STEP: float = 6.0

QUARTER_TURN_DEG: float = 90.0
HALF_TURN_DEG: float = 180.0
