"""Motor combinatorio y de animación para un entrenador de cubo Rubik 3x3."""

__version__ = "0.1.0"
