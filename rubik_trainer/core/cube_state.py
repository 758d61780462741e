# rubik_trainer/core/cube_state.py
from __future__ import annotations

from collections import Counter
from typing import Dict, Iterator, List, Literal, Mapping, Sequence, Tuple

from rubik_trainer import config

Face = Literal["U", "D", "F", "B", "L", "R"]
Color = str  # Letras: "W", "Y", "G", "B", "O", "R"
FaceStickers = Tuple[Color, ...]
CubeHash = Tuple[FaceStickers, ...]

CENTER_INDEX: int = 4


class CubeState:
    """Configuración de stickers de un cubo Rubik 3x3.

    Representación:
        - 6 caras (U D F B L R), cada una con 9 stickers en orden fila-columna
          (índices 0..8). El índice 4 es el centro de la cara.
        - Inmutable por convención: los movimientos devuelven un estado nuevo,
          nunca modifican uno existente. Internamente cada cara es una tupla.

    Igualdad:
        Dos estados son iguales si sus 54 stickers coinciden posición a posición.
    """

    FACES: List[Face] = list(config.FACE_ORDER)  # type: ignore[arg-type]

    __slots__ = ("_faces",)

    def __init__(self, faces: Mapping[str, Sequence[Color]]) -> None:
        """Crea un estado a partir de un mapa cara -> 9 stickers.

        Args:
            faces: Mapa con las 6 caras; cada valor es una secuencia de 9 colores.

        Raises:
            ValueError: Si falta alguna cara o alguna no tiene 9 stickers.
        """
        out: Dict[str, FaceStickers] = {}
        for f in self.FACES:
            if f not in faces:
                raise ValueError(f"Falta la cara {f}")
            stickers = tuple(faces[f])
            if len(stickers) != 9:
                raise ValueError(f"La cara {f} debe tener 9 stickers (tiene {len(stickers)})")
            out[f] = stickers
        self._faces = out

    # --------------------------
    # Constructores
    # --------------------------
    @classmethod
    def solved(cls) -> "CubeState":
        """Devuelve el cubo resuelto canónico (U blanco, F verde, R rojo...)."""
        return cls({f: [config.COLORS_SOLVED[f]] * 9 for f in cls.FACES})

    @classmethod
    def from_faces(cls, faces: Mapping[str, Sequence[Color]]) -> "CubeState":
        """Alias explícito del constructor, validando caras y stickers."""
        return cls(faces)

    @classmethod
    def _from_trusted(cls, faces: Dict[str, FaceStickers]) -> "CubeState":
        # Usado por el aplicador de movimientos: las caras ya vienen validadas.
        obj = cls.__new__(cls)
        obj._faces = faces
        return obj

    # --------------------------
    # Acceso
    # --------------------------
    @property
    def faces(self) -> Dict[str, FaceStickers]:
        """Copia superficial del mapa cara -> stickers (las tuplas no se pueden mutar)."""
        return dict(self._faces)

    def face(self, face: str) -> FaceStickers:
        return self._faces[face]

    def __getitem__(self, face: str) -> FaceStickers:
        return self._faces[face]

    def __iter__(self) -> Iterator[str]:
        return iter(self.FACES)

    def center(self, face: str) -> Color:
        return self._faces[face][CENTER_INDEX]

    def clone(self) -> "CubeState":
        """Devuelve una copia independiente del estado."""
        return CubeState._from_trusted({f: tuple(s) for f, s in self._faces.items()})

    def to_hashable(self) -> CubeHash:
        """Convierte el estado a una tupla de tuplas, en el orden de `FACES`."""
        return tuple(self._faces[f] for f in self.FACES)

    def color_counts(self) -> Dict[Color, int]:
        """Cantidad de stickers de cada color (9 por color en un cubo legal)."""
        counts: Counter = Counter()
        for f in self.FACES:
            counts.update(self._faces[f])
        return dict(counts)

    # --------------------------
    # Solved checker
    # --------------------------
    def is_solved(self) -> bool:
        """Indica si cada cara tiene sus 9 stickers iguales a su propio centro.

        Returns:
            True si el cubo está resuelto; False en caso contrario.
        """
        for f in self.FACES:
            stickers = self._faces[f]
            center = stickers[CENTER_INDEX]
            if any(s != center for s in stickers):
                return False
        return True

    # --------------------------
    # Igualdad / repr
    # --------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubeState):
            return NotImplemented
        return self.to_hashable() == other.to_hashable()

    def __hash__(self) -> int:
        return hash(self.to_hashable())

    def __repr__(self) -> str:
        body = " ".join(f"{f}:{''.join(self._faces[f])}" for f in self.FACES)
        return f"CubeState({body})"


def is_solved(state: CubeState) -> bool:
    """Versión funcional de `CubeState.is_solved`."""
    return state.is_solved()


SOLVED: CubeState = CubeState.solved()
