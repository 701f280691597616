# vesselsim

Stochastic simulation of chemical reaction networks. Species live in a
`Vessel`. Reactions are written with a compact operator syntax. A simulation
records a history of states, and matplotlib can plot that history.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Writing a network

```python
import random

from vesselsim.vessel import Vessel

v = Vessel("Example", random.Random(42))
env = v.environment()
a = v.add("A", 3)
r = v.add("R", 5)
c = v.add("C", 0)

v.add_reaction((a + r) >> 1.0 >> c)   # A + R -> C at rate 1
v.add_reaction(c >> 0.5 >> env)       # C decays into the environment

for line in v.describe():
    print(line)

v.begin_simulation(100)

for time, state in v.state_history():
    print(time, state)
```

- `Vessel(name, rng=None)` takes an optional `random.Random`. Pass a seeded one to get results you can reproduce.
- `Vessel.add(name, initial_value)` registers a species and returns an `Agent`. It raises `ValueError` if the name is already in use.
- `Vessel.environment()` registers the sink species `"env"` with amount 0. Calling it a second time raises `ValueError`.
- `Vessel.state` holds the current amounts, ordered by name.
- `Vessel.reactions` holds the reactions added so far.

### Reaction syntax

A reaction is written as `reactants >> rate >> products`:

- Reactants and products are single agents or sums of agents, such as `a + r`. A sum is an `AgentGroup`.
- `reactants >> rate` gives a `PendingReaction`.
- Shifting that into the products gives a `Reaction`.

`Reaction.describe()` returns the reaction in the same notation, for example
`Reaction: A + R >> 1 >>= C`.

## How the simulation runs

`begin_simulation(max_time)` raises `ValueError` if the vessel has no
reactions. Otherwise it repeats the following steps until simulated time
reaches `max_time`:

1. Every reaction draws an exponentially distributed delay. The rate of that draw is the reaction's rate multiplied by the product of its reactant amounts. If any reactant is zero or absent, the delay is infinite.
2. The reaction with the shortest delay is selected, and the clock advances by that delay.
3. If every reactant of the selected reaction is above zero, the reaction fires. It takes one unit from each reactant and adds one to each product.
4. After a reaction fires, a snapshot of all amounts is stored with the time.

`state_history()` returns those snapshots as a list of `(time, dict)` pairs.

Per-step details are sent to the `vesselsim.vessel` logger at DEBUG level.

## Plotting

```python
import matplotlib.pyplot as plt

from vesselsim.chart import collect_series, plot_state_history

fig, ax = plt.subplots()
plot_state_history(v.state_history(), ax)
plt.show()
```

`plot_state_history` draws one labelled line per species and returns the axes.

- It leaves out `"env"`.
- If no axes are given, it creates a new figure.

`collect_series` returns the per-species `(times, values)` series, ordered by
name and without `"env"`. Use it if you want to plot the data some other way.

## The circadian rhythm example

A model of an activator/repressor circadian oscillator is included. To run it
over a simulated day (1440 time units) and show a plot of its species:

```
vesselsim-circadian
```

The command first prints the vessel's description. It accepts these options:

- `--max-time T`: simulate until time `T` (default 1440).
- `--seed N`: seed the random number generator.
- `--output FILE`: save the chart to `FILE` instead of opening a window.

From Python, `vesselsim.circadian.build_circadian_rhythm(rng)` returns the
configured vessel, ready for `begin_simulation`.