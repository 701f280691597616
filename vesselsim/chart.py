"""Plotting of simulation history."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from matplotlib.axes import Axes
from matplotlib.figure import Figure

EXCLUDED = frozenset({"env"})


def collect_series(
    state_history: Iterable[tuple[float, Mapping[str, Any]]],
) -> dict[str, tuple[list[float], list[float]]]:
    """Group history into per-agent (times, values) series, ordered by name."""
    series: dict[str, tuple[list[float], list[float]]] = {}
    for time, state in state_history:
        for agent, value in state.items():
            if agent in EXCLUDED:
                continue
            times, values = series.setdefault(agent, ([], []))
            times.append(time)
            values.append(float(value))
    return {name: series[name] for name in sorted(series)}


def plot_state_history(
    state_history: Iterable[tuple[float, Mapping[str, Any]]],
    ax: Axes | None = None,
) -> Axes:
    """Draw one line per agent onto ``ax`` (a new figure's axes if omitted)."""
    if ax is None:
        ax = Figure(figsize=(8, 6)).add_subplot()
    series = collect_series(state_history)
    for name, (times, values) in series.items():
        ax.plot(times, values, label=name)
    ax.set_xlabel("time")
    ax.set_ylabel("amount")
    if series:
        ax.legend()
    return ax