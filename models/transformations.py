"""
Coordinate transformations between abc, alpha-beta, and dq frames.

Two layers live here:

* formula functions (``abc_to_alpha_beta`` and friends) take plain scalars or
  numpy arrays and return tuples, computed in single precision;
* in-place operations (``forward_full_clarke`` and friends) take one of the
  record types below, read its input fields and overwrite its output fields.
  They are meant to be called once per control tick on a record the caller
  keeps around.

Park transforms take ``sin(theta)`` and ``cos(theta)`` from the caller; the
angle itself never enters this module.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np


SQRT3 = np.float32(math.sqrt(3.0))
INV_SQRT3 = np.float32(1.0 / math.sqrt(3.0))
TWO_THIRDS = np.float32(2.0 / 3.0)
ONE_THIRD = np.float32(1.0 / 3.0)
HALF = np.float32(0.5)
TWO = np.float32(2.0)

_f32 = np.float32


class _Float32Fields:
    """Stores every assigned field as ``numpy.float32``."""

    def __setattr__(self, name: str, value) -> None:
        object.__setattr__(self, name, _f32(value))


# --------- Records ------------
@dataclass
class ForwardFullClarke(_Float32Fields):
    """abc -> alpha-beta, no balance assumption."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    alpha: float = 0.0
    beta: float = 0.0


@dataclass
class ForwardReducedClarke(_Float32Fields):
    """ab -> alpha-beta, phase c implied as -(a + b)."""

    a: float = 0.0
    b: float = 0.0
    alpha: float = 0.0
    beta: float = 0.0


@dataclass
class InverseFullClarke(_Float32Fields):
    """alpha-beta -> abc."""

    alpha: float = 0.0
    beta: float = 0.0
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0


@dataclass
class InverseReducedClarke(_Float32Fields):
    """alpha-beta -> ab, phase c left to the caller."""

    alpha: float = 0.0
    beta: float = 0.0
    a: float = 0.0
    b: float = 0.0


@dataclass
class ForwardPark(_Float32Fields):
    """alpha-beta -> dq."""

    alpha: float = 0.0
    beta: float = 0.0
    sin_theta: float = 0.0
    cos_theta: float = 0.0
    d: float = 0.0
    q: float = 0.0


@dataclass
class InversePark(_Float32Fields):
    """dq -> alpha-beta."""

    d: float = 0.0
    q: float = 0.0
    sin_theta: float = 0.0
    cos_theta: float = 0.0
    alpha: float = 0.0
    beta: float = 0.0
# ------------------------------


def abc_to_alpha_beta(a: float, b: float, c: float) -> Tuple[np.float32, np.float32]:
    """Clarke transform from three-phase to alpha-beta stationary frame.

    Amplitude-invariant form. The zero-sequence part (a + b + c) / 3 is
    dropped, so any a, b, c are accepted.
    """
    a, b, c = _f32(a), _f32(b), _f32(c)
    alpha = TWO_THIRDS * a - ONE_THIRD * (b + c)
    beta = INV_SQRT3 * (b - c)
    return alpha, beta


def ab_to_alpha_beta(a: float, b: float) -> Tuple[np.float32, np.float32]:
    """Reduced Clarke transform; valid only when a + b + c = 0."""
    a, b = _f32(a), _f32(b)
    alpha = a
    beta = INV_SQRT3 * (a + TWO * b)
    return alpha, beta


def alpha_beta_to_abc(alpha: float, beta: float) -> Tuple[np.float32, np.float32, np.float32]:
    """Inverse Clarke transform from alpha-beta back to three-phase abc."""
    alpha, beta = _f32(alpha), _f32(beta)
    a = alpha
    b = HALF * (-alpha + SQRT3 * beta)
    c = HALF * (-alpha - SQRT3 * beta)
    return a, b, c


def alpha_beta_to_ab(alpha: float, beta: float) -> Tuple[np.float32, np.float32]:
    """Reduced inverse Clarke transform; c is recoverable as -(a + b)."""
    alpha, beta = _f32(alpha), _f32(beta)
    a = alpha
    b = HALF * (SQRT3 * beta - alpha)
    return a, b


def alpha_beta_to_dq(
    alpha: float, beta: float, sin_theta: float, cos_theta: float
) -> Tuple[np.float32, np.float32]:
    """Park transform from alpha-beta to dq rotating frame."""
    alpha, beta = _f32(alpha), _f32(beta)
    sin_t, cos_t = _f32(sin_theta), _f32(cos_theta)
    d = alpha * cos_t + beta * sin_t
    q = beta * cos_t - alpha * sin_t
    return d, q


def dq_to_alpha_beta(
    d: float, q: float, sin_theta: float, cos_theta: float
) -> Tuple[np.float32, np.float32]:
    """Inverse Park transform from dq to alpha-beta."""
    d, q = _f32(d), _f32(q)
    sin_t, cos_t = _f32(sin_theta), _f32(cos_theta)
    alpha = d * cos_t - q * sin_t
    beta = q * cos_t + d * sin_t
    return alpha, beta


def abc_to_dq(
    a: float, b: float, c: float, sin_theta: float, cos_theta: float
) -> Tuple[np.float32, np.float32]:
    """Direct transform from abc to dq."""
    alpha, beta = abc_to_alpha_beta(a, b, c)
    return alpha_beta_to_dq(alpha, beta, sin_theta, cos_theta)


def dq_to_abc(
    d: float, q: float, sin_theta: float, cos_theta: float
) -> Tuple[np.float32, np.float32, np.float32]:
    """Direct transform from dq to abc."""
    alpha, beta = dq_to_alpha_beta(d, q, sin_theta, cos_theta)
    return alpha_beta_to_abc(alpha, beta)


def zero_sequence(a: float, b: float, c: float) -> np.float32:
    """Common-mode part of a three-phase set, lost by the forward Clarke transform."""
    return (_f32(a) + _f32(b) + _f32(c)) * ONE_THIRD


def is_balanced(a: float, b: float, c: float, tol: float = 1e-4) -> bool:
    """Check a + b + c = 0 relative to the largest phase magnitude."""
    scale = max(1.0, abs(float(a)), abs(float(b)), abs(float(c)))
    return abs(float(a) + float(b) + float(c)) <= tol * scale


# --------- In-place operations ------------
def forward_full_clarke(rec: ForwardFullClarke) -> None:
    rec.alpha, rec.beta = abc_to_alpha_beta(rec.a, rec.b, rec.c)


def forward_reduced_clarke(rec: ForwardReducedClarke) -> None:
    rec.alpha, rec.beta = ab_to_alpha_beta(rec.a, rec.b)


def inverse_full_clarke(rec: InverseFullClarke) -> None:
    rec.a, rec.b, rec.c = alpha_beta_to_abc(rec.alpha, rec.beta)


def inverse_reduced_clarke(rec: InverseReducedClarke) -> None:
    rec.a, rec.b = alpha_beta_to_ab(rec.alpha, rec.beta)


def forward_park(rec: ForwardPark) -> None:
    rec.d, rec.q = alpha_beta_to_dq(rec.alpha, rec.beta, rec.sin_theta, rec.cos_theta)


def inverse_park(rec: InversePark) -> None:
    rec.alpha, rec.beta = dq_to_alpha_beta(rec.d, rec.q, rec.sin_theta, rec.cos_theta)


__all__ = [
    "SQRT3",
    "ForwardFullClarke",
    "ForwardReducedClarke",
    "InverseFullClarke",
    "InverseReducedClarke",
    "ForwardPark",
    "InversePark",
    "abc_to_alpha_beta",
    "ab_to_alpha_beta",
    "alpha_beta_to_abc",
    "alpha_beta_to_ab",
    "alpha_beta_to_dq",
    "dq_to_alpha_beta",
    "abc_to_dq",
    "dq_to_abc",
    "zero_sequence",
    "is_balanced",
    "forward_full_clarke",
    "forward_reduced_clarke",
    "inverse_full_clarke",
    "inverse_reduced_clarke",
    "forward_park",
    "inverse_park",
]
