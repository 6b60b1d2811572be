from enum import Enum, auto


class CallState(Enum):
    RECEIVED = auto()
    VALIDATING = auto()
    REJECTED = auto()
    SYNTHESIZING = auto()
    DISPATCHING = auto()
    COMPLETED = auto()
    FAILED = auto()


TRANSITIONS: dict[CallState, set[CallState]] = {
    CallState.RECEIVED: {CallState.VALIDATING, CallState.REJECTED},
    CallState.VALIDATING: {CallState.REJECTED, CallState.SYNTHESIZING, CallState.DISPATCHING},
    CallState.SYNTHESIZING: {CallState.DISPATCHING},
    CallState.DISPATCHING: {CallState.COMPLETED, CallState.FAILED},
    CallState.REJECTED: set(),
    CallState.COMPLETED: set(),
    CallState.FAILED: set(),
}

TERMINAL_STATES = frozenset({CallState.REJECTED, CallState.COMPLETED, CallState.FAILED})


def validate_transition(current: CallState, target: CallState) -> None:
    """Raise ValueError if the transition is not allowed."""
    allowed = TRANSITIONS.get(current, set())
    if target not in allowed:
        raise ValueError(
            f"Invalid transition: {current.name} -> {target.name}. "
            f"Allowed: {[s.name for s in allowed]}"
        )
