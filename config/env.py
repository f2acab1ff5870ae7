"""
Конфигурация проекта vector transforms.

Все настраиваемые параметры собраны сверху с русскими комментариями.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# -------- Параметры тестового сигнала ----------
SIGNAL_AMPLITUDE = 1.0     # амплитуда фазного тока, А
SIGNAL_FREQUENCY = 50.0    # электрическая частота, Гц
SIGNAL_THETA0 = 0.0        # начальный электрический угол, рад
SIGNAL_UNBALANCE = 0.0     # относительная ошибка амплитуды фазы C (0 = симметрия)
SIGNAL_SCENARIO = "sine"   # сценарий: sine / unbalanced / harmonic
# -----------------------------------------------

# -------- Параметры преобразований ----------
CLARKE_VARIANT = "full"    # "full" (A, B, C) или "reduced" (A, B)
CHECK_BALANCE = True       # предупреждать о несимметрии перед reduced Clarke
BALANCE_TOL = 1e-4         # допуск |A+B+C| относительно max(|A|,|B|,|C|)
ROUND_TRIP_TOL = 1e-5      # ожидаемая точность обратного преобразования
# --------------------------------------------

# -------- Параметры прогона ----------
SIM_T_END = 0.04           # длительность, с (два периода 50 Гц)
SIM_DT = 1e-4              # шаг контура, с (период ШИМ 10 кГц)
SIM_SAVE_DIR = "outputs/results"  # каталог для NPZ/JSON
# -------------------------------------

CLARKE_VARIANTS = ("full", "reduced")
SCENARIOS = ("sine", "unbalanced", "harmonic")


# --------- Структуры данных ------------
@dataclass(frozen=True)
class SignalParams:
    amplitude: float
    frequency: float
    theta0: float = 0.0
    unbalance: float = 0.0
    scenario: str = "sine"

    def __post_init__(self) -> None:
        if self.amplitude < 0.0:
            raise ValueError("amplitude must be non-negative")
        if not math.isfinite(self.frequency):
            raise ValueError("frequency must be finite")
        if not -1.0 < self.unbalance < 1.0:
            raise ValueError("unbalance must lie in (-1, 1)")
        if self.scenario not in SCENARIOS:
            raise ValueError(f"Unknown scenario '{self.scenario}'")

    @property
    def omega_e(self) -> float:
        return 2.0 * math.pi * self.frequency


@dataclass(frozen=True)
class TransformParams:
    clarke: str = "full"
    check_balance: bool = True
    balance_tol: float = 1e-4
    round_trip_tol: float = 1e-5

    def __post_init__(self) -> None:
        if self.clarke not in CLARKE_VARIANTS:
            raise ValueError(f"clarke must be one of {CLARKE_VARIANTS}, got '{self.clarke}'")
        if self.balance_tol <= 0.0:
            raise ValueError("balance_tol must be positive")
        if self.round_trip_tol <= 0.0:
            raise ValueError("round_trip_tol must be positive")


@dataclass(frozen=True)
class SimulationParams:
    t_end: float
    dt: float
    save_dir: str = "outputs/results"

    def __post_init__(self) -> None:
        if self.dt <= 0.0:
            raise ValueError("dt must be positive")
        if self.t_end <= 0.0:
            raise ValueError("t_end must be positive")

    @property
    def n_steps(self) -> int:
        return max(1, int(round(self.t_end / self.dt)))


@dataclass(frozen=True)
class EnvConfig:
    signal: SignalParams
    transform: TransformParams
    sim: SimulationParams
# ---------------------------------------


def create_default_env() -> EnvConfig:
    signal = SignalParams(
        amplitude=SIGNAL_AMPLITUDE,
        frequency=SIGNAL_FREQUENCY,
        theta0=SIGNAL_THETA0,
        unbalance=SIGNAL_UNBALANCE,
        scenario=SIGNAL_SCENARIO,
    )
    transform = TransformParams(
        clarke=CLARKE_VARIANT,
        check_balance=CHECK_BALANCE,
        balance_tol=BALANCE_TOL,
        round_trip_tol=ROUND_TRIP_TOL,
    )
    sim = SimulationParams(t_end=SIM_T_END, dt=SIM_DT, save_dir=SIM_SAVE_DIR)
    return EnvConfig(signal=signal, transform=transform, sim=sim)


ENV = create_default_env()


__all__ = [
    "CLARKE_VARIANTS",
    "SCENARIOS",
    "SignalParams",
    "TransformParams",
    "SimulationParams",
    "EnvConfig",
    "create_default_env",
    "ENV",
]
