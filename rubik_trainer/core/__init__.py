from rubik_trainer.core.cube_state import SOLVED, CubeState, is_solved
from rubik_trainer.core.move_applier import apply_move, apply_sequence
from rubik_trainer.core.timeline import HistoryEntry, Timeline
from rubik_trainer.core.animation import AnimationState, MoveAnimator, Phase

__all__ = [
    "SOLVED",
    "CubeState",
    "is_solved",
    "apply_move",
    "apply_sequence",
    "HistoryEntry",
    "Timeline",
    "AnimationState",
    "MoveAnimator",
    "Phase",
]
