"""
Утилита командной строки для прогона преобразований Кларк/Парк на тестовом сигнале.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

# ensure project root importable when run as a script
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config.env import CLARKE_VARIANTS, ENV, SCENARIOS, EnvConfig, create_default_env  # noqa: E402
from simulation.run_simulation import run_transforms  # noqa: E402
from utils.logging_config import setup_logging  # noqa: E402

logger = logging.getLogger("vector_transforms")


def build_env_from_args(args: argparse.Namespace) -> EnvConfig:
    default_env = create_default_env()
    signal = replace(
        default_env.signal,
        amplitude=args.amplitude,
        frequency=args.frequency,
        theta0=args.theta0,
        unbalance=args.unbalance,
        scenario=args.scenario,
    )
    transform = replace(default_env.transform, clarke=args.clarke, check_balance=args.check_balance)
    sim = replace(default_env.sim, t_end=args.t_end, dt=args.dt, save_dir=args.save_dir)
    return replace(default_env, signal=signal, transform=transform, sim=sim)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    # Use ENV just for showing defaults in help
    parser = argparse.ArgumentParser(description="Run Clarke/Park transforms on a synthetic three-phase signal")
    parser.add_argument("--clarke", choices=CLARKE_VARIANTS, default=ENV.transform.clarke, help="Clarke variant")
    parser.add_argument("--scenario", choices=SCENARIOS, default=ENV.signal.scenario, help="test signal")
    parser.add_argument("--amplitude", type=float, default=ENV.signal.amplitude, help="phase amplitude (A)")
    parser.add_argument("--frequency", type=float, default=ENV.signal.frequency, help="electrical frequency (Hz)")
    parser.add_argument("--theta0", type=float, default=ENV.signal.theta0, help="initial electrical angle (rad)")
    parser.add_argument("--unbalance", type=float, default=ENV.signal.unbalance, help="relative error of phase c")
    parser.add_argument("--t-end", type=float, default=ENV.sim.t_end, help="run time (s)")
    parser.add_argument("--dt", type=float, default=ENV.sim.dt, help="control tick (s)")
    parser.add_argument("--save-dir", default=ENV.sim.save_dir, help="directory for NPZ/JSON results")
    parser.add_argument("--no-balance-check", dest="check_balance", action="store_false", help="skip balance warning")
    parser.add_argument("--plot", dest="plot", action="store_true", help="generate plots after run")
    parser.add_argument("--no-plot", dest="plot", action="store_false", help="skip plotting")
    parser.add_argument("--figures-dir", default="outputs/figures", help="directory for PNG figures")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.set_defaults(plot=False, check_balance=ENV.transform.check_balance)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> Path:
    args = parse_args(argv)
    setup_logging(log_level=getattr(logging, args.log_level))
    env_cfg = build_env_from_args(args)

    result = run_transforms(env_cfg, save=True, progress=True)
    summary = result.summary
    logger.info(
        "mean d=%.4f q=%.4f, round-trip %s (max error %.3g)",
        summary["mean_d"],
        summary["mean_q"],
        "ok" if summary["round_trip_ok"] else "FAILED",
        summary["max_round_trip_error"],
    )
    if args.plot:
        from outputs.plots import plot_run  # local import to avoid hard dependency if plotting is off

        paths = plot_run(str(result.npz_path), save_dir=args.figures_dir)
        logger.info("saved %d plots to %s", len(paths), args.figures_dir)
    return result.npz_path


if __name__ == "__main__":
    main()
