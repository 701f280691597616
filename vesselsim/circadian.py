"""The circadian rhythm example network and its command-line entry point."""

from __future__ import annotations

import argparse
import random

from vesselsim.chart import plot_state_history
from vesselsim.vessel import Vessel

ALPHA_A = 50
ALPHA_A_BOUND = 500
ALPHA_R = 0.01
ALPHA_R_BOUND = 50
BETA_A = 50
BETA_R = 5
GAMMA_A = 1
GAMMA_R = 1
GAMMA_C = 2
DELTA_A = 1
DELTA_R = 0.2
DELTA_MA = 10
DELTA_MR = 0.5
THETA_A = 50
THETA_R = 100

DEFAULT_MAX_TIME = 24 * 60


def build_circadian_rhythm(rng: random.Random | None = None) -> Vessel:
    """Build the activator/repressor circadian rhythm vessel."""
    v = Vessel("Circadian Rhythm", rng)
    env = v.environment()

    da = v.add("DA", 1)
    d_a = v.add("D_A", 0)
    dr = v.add("DR", 1)
    d_r = v.add("D_R", 0)
    ma = v.add("MA", 0)
    mr = v.add("MR", 0)
    a = v.add("A", 0)
    r = v.add("R", 0)
    c = v.add("C", 0)

    for reaction in (
        a + da >> GAMMA_A >> d_a,
        d_a >> THETA_A >> da + a,
        a + dr >> GAMMA_R >> d_r,
        d_r >> THETA_R >> dr + a,
        d_a >> ALPHA_A_BOUND >> ma + d_a,
        da >> ALPHA_A >> ma + da,
        d_r >> ALPHA_R_BOUND >> mr + d_r,
        dr >> ALPHA_R >> mr + dr,
        ma >> BETA_A >> ma + a,
        mr >> BETA_R >> mr + r,
        a + r >> GAMMA_C >> c,
        c >> DELTA_A >> r,
        a >> DELTA_A >> env,
        r >> DELTA_R >> env,
        ma >> DELTA_MA >> env,
        mr >> DELTA_MR >> env,
    ):
        v.add_reaction(reaction)
    return v


def main(argv: list[str] | None = None) -> int:
    """Simulate the circadian rhythm and show or save a chart of it."""
    parser = argparse.ArgumentParser(description="Simulate a circadian rhythm network.")
    parser.add_argument("--max-time", type=float, default=DEFAULT_MAX_TIME)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", help="save the chart to this file instead of showing it")
    args = parser.parse_args(argv)

    vessel = build_circadian_rhythm(random.Random(args.seed))
    for line in vessel.describe():
        print(line)
    vessel.begin_simulation(args.max_time)
    history = vessel.state_history()

    if args.output:
        from matplotlib.figure import Figure

        figure = Figure(figsize=(8, 6))
        plot_state_history(history, figure.add_subplot())
        figure.savefig(args.output)
    else:
        import matplotlib.pyplot as plt

        _, ax = plt.subplots(figsize=(8, 6))
        plot_state_history(history, ax)
        plt.show()
    return 0