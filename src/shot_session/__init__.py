from src.shot_session.pointer_input import PointerInterpreter
from src.shot_session.session_controller import ShotSession, clamp_trial_count
from src.shot_session.session_state import SessionState

__all__ = [
    "PointerInterpreter",
    "SessionState",
    "ShotSession",
    "clamp_trial_count",
]
