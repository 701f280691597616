"""A reaction vessel simulated with the stochastic simulation algorithm."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from typing import Any

from vesselsim.agent import Agent
from vesselsim.reaction import Reaction
from vesselsim.symbol_table import SymbolTable

logger = logging.getLogger(__name__)

ENVIRONMENT = "env"


class Vessel:
    """Holds agents and reactions and runs stochastic simulations on them."""

    def __init__(self, name: str, rng: random.Random | None = None) -> None:
        self._name = name
        self._rng = rng or random.Random()
        self._state = SymbolTable()
        self._reactions: list[Reaction] = []
        self._history: list[tuple[float, dict[str, Any]]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def reactions(self) -> tuple[Reaction, ...]:
        return tuple(self._reactions)

    @property
    def state(self) -> dict[str, Any]:
        """Current amounts, ordered by name."""
        return self._state.to_dict()

    def add(self, name: str, initial_value: Any) -> Agent:
        """Register a new agent with its starting amount."""
        try:
            self._state.insert(name, initial_value)
        except KeyError:
            raise ValueError(f"Item '{name}' already exists in the vessel.") from None
        return Agent(name, initial_value)

    def add_reaction(self, reaction: Reaction) -> None:
        self._reactions.append(reaction)

    def environment(self) -> Agent:
        """Register the environment agent, a sink with starting amount 0."""
        try:
            self._state.insert(ENVIRONMENT, 0)
        except KeyError:
            raise ValueError("Environment already exists in the vessel.") from None
        return Agent(ENVIRONMENT, 0)

    def describe(self) -> Iterator[str]:
        """Yield a description of the vessel, its agents and its reactions."""
        yield f"Vessel: {self._name}"
        yield from self._state.format_lines()
        for reaction in self._reactions:
            yield reaction.describe()

    def begin_simulation(self, max_time: float) -> None:
        """Fire reactions until simulated time reaches ``max_time``."""
        if not self._reactions:
            raise ValueError("Cannot simulate a vessel without reactions.")
        time = 0.0
        while time < max_time:
            for reaction in self._reactions:
                reaction.delay = reaction.sample_delay(self._state, self._rng)
                logger.debug("%s delay: %s", reaction.describe(), reaction.delay)
            selected = min(self._reactions, key=lambda r: r.delay)
            time += selected.delay

            available = all(
                (value := self._state.lookup(agent.name)) is not None and value > 0
                for agent in selected.reactants
            )
            if not available:
                continue
            for agent in selected.reactants:
                self._state.decrement(agent.name)
            for agent in selected.products:
                self._state.increment(agent.name)
            snapshot = self._state.to_dict()
            logger.debug("Time: %s, state: %s", time, snapshot)
            self._history.append((time, snapshot))

    def state_history(self) -> list[tuple[float, dict[str, Any]]]:
        """Return (time, snapshot) pairs recorded after each fired reaction."""
        return [(time, dict(snapshot)) for time, snapshot in self._history]