from dataclasses import replace

import pytest

from config.env import ENV, SignalParams, SimulationParams, TransformParams, create_default_env


def test_default_env():
    env = create_default_env()
    assert env == ENV
    assert env.transform.clarke == "full"
    assert env.sim.n_steps == 400


@pytest.mark.parametrize(
    "factory",
    [
        lambda: SimulationParams(t_end=0.1, dt=0.0),
        lambda: SimulationParams(t_end=-1.0, dt=1e-4),
        lambda: TransformParams(clarke="half"),
        lambda: TransformParams(balance_tol=0.0),
        lambda: SignalParams(amplitude=-1.0, frequency=50.0),
        lambda: SignalParams(amplitude=1.0, frequency=50.0, unbalance=1.0),
        lambda: SignalParams(amplitude=1.0, frequency=50.0, scenario="square"),
    ],
)
def test_invalid_params_raise(factory):
    with pytest.raises(ValueError):
        factory()


def test_replace_revalidates():
    with pytest.raises(ValueError):
        replace(ENV.transform, clarke="reduced-ish")
