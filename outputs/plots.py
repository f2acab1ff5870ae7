"""
Построение графиков по результатам прогона преобразований, сохранённым в NPZ.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from outputs.styles import PHASE_COLORS, apply_style


def _unique_png(prefix: str, directory: Path, idx_hint: int | None = None) -> Path:
    """
    Вернуть уникальный путь PNG в формате <prefix>_<n>.png.
    Если idx_hint задан, сначала используется он.
    """
    if idx_hint is not None:
        candidate = directory / f"{prefix}_{idx_hint}.png"
        if not candidate.exists():
            return candidate
    idx = 1
    while True:
        candidate = directory / f"{prefix}_{idx}.png"
        if not candidate.exists():
            return candidate
        idx += 1


def _load_meta(data) -> dict:
    if "meta" not in data.files:
        return {}
    meta_raw = data["meta"].item()
    if isinstance(meta_raw, bytes):
        meta_raw = meta_raw.decode("utf-8", errors="ignore")
    try:
        return json.loads(str(meta_raw))
    except json.JSONDecodeError:
        return {}


def _format_meta(meta: dict) -> str:
    if not meta:
        return ""
    signal = meta.get("signal", {})
    transform = meta.get("transform", {})
    sim = meta.get("sim", {})
    parts = [
        f"clarke: {transform.get('clarke', '?')}",
        f"scenario: {signal.get('scenario', '?')}",
        f"f: {signal.get('frequency', '?')} Hz",
        f"amp: {signal.get('amplitude', '?')}",
        f"dt: {sim.get('dt', '?')}",
    ]
    return "\n".join(parts)


def _extract_index_from_data_name(result_path: Path) -> int | None:
    m = re.search(r"transform_(\d+)", result_path.stem)
    if m:
        return int(m.group(1))
    return None


def _annotate(ax, text: str) -> None:
    if not text:
        return
    ax.text(
        0.02,
        0.98,
        text,
        transform=ax.transAxes,
        ha="left",
        va="top",
        fontsize=9,
        bbox={"facecolor": "white", "alpha": 0.7, "edgecolor": "none"},
    )


def _plot_group(t, series, ylabel: str, meta: str, path: Path) -> Path:
    fig, ax = plt.subplots()
    for (label, y, style), color in zip(series, PHASE_COLORS):
        ax.plot(t, y, style, color=color, label=label)
    ax.set_xlabel("t, s")
    ax.set_ylabel(ylabel)
    ax.legend(loc="upper right")
    _annotate(ax, meta)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path


def plot_run(result_path: str, save_dir: str = "outputs/figures") -> list[Path]:
    apply_style()
    data = np.load(result_path)
    meta = _format_meta(_load_meta(data))
    idx_hint = _extract_index_from_data_name(Path(result_path))

    save_dir_path = Path(save_dir)
    save_dir_path.mkdir(parents=True, exist_ok=True)
    t = data["t"]

    saved = [
        _plot_group(
            t,
            [("i_a", data["i_a"], "-"), ("i_b", data["i_b"], "-"), ("i_c", data["i_c"], "-")],
            "Phase current, A",
            meta,
            _unique_png("abc", save_dir_path, idx_hint),
        ),
        _plot_group(
            t,
            [("i_alpha", data["i_alpha"], "-"), ("i_beta", data["i_beta"], "-")],
            "Stationary frame, A",
            meta,
            _unique_png("alpha_beta", save_dir_path, idx_hint),
        ),
        _plot_group(
            t,
            [("i_d", data["i_d"], "-"), ("i_q", data["i_q"], "-")],
            "Rotating frame, A",
            meta,
            _unique_png("dq", save_dir_path, idx_hint),
        ),
        # фазы после обратных преобразований
        _plot_group(
            t,
            [("a_rec", data["a_rec"], "--"), ("b_rec", data["b_rec"], "--"), ("c_rec", data["c_rec"], "--")],
            "Reconstructed phase, A",
            meta,
            _unique_png("abc_rec", save_dir_path, idx_hint),
        ),
    ]
    return saved


__all__ = ["plot_run"]
