"""
Вспомогательные настройки оформления для Matplotlib.
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

# цвета фаз и осей: a/alpha/d, b/beta/q, c
PHASE_COLORS = ("tab:red", "tab:green", "tab:blue")


def apply_style() -> None:
    plt.style.use("seaborn-v0_8-whitegrid")
    plt.rcParams.update(
        {
            "figure.figsize": (10, 4.5),
            "axes.grid": True,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": 0.6,
            "lines.linewidth": 1.5,
        }
    )


__all__ = ["PHASE_COLORS", "apply_style"]
