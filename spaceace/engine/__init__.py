"""Campaign engine components."""

from .dice import DiceEngine, RandomnessReport, RollResult
from .galaxy_generator import generate_galaxy, initialize_galaxy
from .missions import create_mission
from .rolls import roll_dice
from .sectors import move_to
from .sessions import end_current_session, start_session

__all__ = [
    "DiceEngine",
    "RandomnessReport",
    "RollResult",
    "create_mission",
    "end_current_session",
    "generate_galaxy",
    "initialize_galaxy",
    "move_to",
    "roll_dice",
    "start_session",
]
