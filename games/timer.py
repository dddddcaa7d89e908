"""Countdown handling shared by the timed games.

Works on any frozen state exposing `time_left_ms`, `time_limit_ms`, `ended`
and `current_round`.
"""

from dataclasses import replace


def tick(state, delta_ms: int):
    """Count down by the elapsed time. Reaching zero ends the session."""
    if state.ended:
        return state
    time_left = max(0, state.time_left_ms - max(0, delta_ms or 0))
    if time_left > 0:
        return replace(state, time_left_ms=time_left)
    return replace(state, time_left_ms=0, ended=True, current_round=None)


def add_time_bonus(state, bonus_ms: int):
    """Grant extra time, never exceeding the configured limit."""
    if state.ended or bonus_ms <= 0:
        return state
    time_left = min(state.time_limit_ms, state.time_left_ms + bonus_ms)
    return replace(state, time_left_ms=time_left)


def reset(state):
    """Refill the countdown, used when a game times each round separately."""
    if state.ended:
        return state
    return replace(state, time_left_ms=state.time_limit_ms)
