"""Reaction rules between named agents."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Any, Protocol

from vesselsim.symbol_table import SymbolTable


class _Named(Protocol):
    name: str


@dataclass
class Reaction:
    """Consumes ``reactants`` and yields ``products`` at a given rate."""

    reactants: tuple[Any, ...]
    rate: float
    products: tuple[Any, ...]
    delay: float = field(default=0.0, compare=False)

    def __post_init__(self) -> None:
        self.reactants = tuple(self.reactants)
        self.products = tuple(self.products)

    def reactant_product(self, state: SymbolTable) -> float:
        """Product of the current reactant amounts; 0.0 if any is absent or zero."""
        product = 1.0
        for agent in self.reactants:
            value = state.lookup(agent.name)
            if value is None or value == 0:
                return 0.0
            product *= float(value)
        return product

    def sample_delay(self, state: SymbolTable, rng: random.Random | None = None) -> float:
        """Draw an exponentially distributed waiting time for this reaction."""
        product = self.reactant_product(state)
        if product == 0.0:
            return math.inf
        rng = rng or random.Random()
        return rng.expovariate(self.rate * product)

    def describe(self) -> str:
        """Return the reaction in ``A + B >> rate >>= C`` notation."""
        lhs = " + ".join(agent.name for agent in self.reactants)
        rhs = " + ".join(agent.name for agent in self.products)
        return f"Reaction: {lhs} >> {self.rate:g} >>= {rhs}"