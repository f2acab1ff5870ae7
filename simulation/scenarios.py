"""
Built-in three-phase test signals for exercising the transforms.
"""

from __future__ import annotations

import math
from typing import Callable, Tuple

from config.env import SignalParams


PhaseSignal = Callable[[float], Tuple[float, float, float]]

_PHASE_SHIFT = 2.0 * math.pi / 3.0


def electrical_angle(t: float, params: SignalParams) -> float:
    """Electrical angle at time t, wrapped to [0, 2*pi)."""
    return (params.theta0 + params.omega_e * t) % (2.0 * math.pi)


def get_scenario(params: SignalParams) -> PhaseSignal:
    """
    Return callable i_abc(t) for the configured scenario.

    Phase a peaks at theta = 0, so a balanced sine maps to d = amplitude, q = 0
    when the Park angle tracks the signal angle.
    """
    amp = params.amplitude

    if params.scenario == "sine":

        def i_abc(t: float) -> Tuple[float, float, float]:
            theta = params.theta0 + params.omega_e * t
            return (
                amp * math.cos(theta),
                amp * math.cos(theta - _PHASE_SHIFT),
                amp * math.cos(theta + _PHASE_SHIFT),
            )

    elif params.scenario == "unbalanced":
        amp_c = amp * (1.0 + params.unbalance)

        def i_abc(t: float) -> Tuple[float, float, float]:
            theta = params.theta0 + params.omega_e * t
            return (
                amp * math.cos(theta),
                amp * math.cos(theta - _PHASE_SHIFT),
                amp_c * math.cos(theta + _PHASE_SHIFT),
            )

    elif params.scenario == "harmonic":
        # 5th harmonic (negative sequence), 10% of fundamental
        amp_5 = 0.1 * amp

        def i_abc(t: float) -> Tuple[float, float, float]:
            theta = params.theta0 + params.omega_e * t
            return (
                amp * math.cos(theta) + amp_5 * math.cos(5.0 * theta),
                amp * math.cos(theta - _PHASE_SHIFT) + amp_5 * math.cos(5.0 * theta + _PHASE_SHIFT),
                amp * math.cos(theta + _PHASE_SHIFT) + amp_5 * math.cos(5.0 * theta - _PHASE_SHIFT),
            )

    else:
        raise ValueError(f"Unknown scenario '{params.scenario}'")

    return i_abc


__all__ = ["PhaseSignal", "electrical_angle", "get_scenario"]
