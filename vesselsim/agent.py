"""Agents and the operator notation that builds reactions from them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from numbers import Real
from typing import Any

from vesselsim.reaction import Reaction


@dataclass(frozen=True)
class Agent:
    """A named quantity in a vessel, holding its value at creation."""

    name: str
    value: Any

    def __add__(self, other: object) -> AgentGroup:
        if isinstance(other, Agent):
            return AgentGroup((self, other))
        if isinstance(other, AgentGroup):
            return AgentGroup((self, *other.agents))
        return NotImplemented

    def __rshift__(self, rate: object) -> PendingReaction:
        if isinstance(rate, Real) and not isinstance(rate, bool):
            return PendingReaction((self,), float(rate))
        return NotImplemented


@dataclass(frozen=True)
class AgentGroup:
    """An ordered collection of agents, e.g. the reactants of a reaction."""

    agents: tuple[Agent, ...]

    def __iter__(self) -> Iterator[Agent]:
        return iter(self.agents)

    def __len__(self) -> int:
        return len(self.agents)

    def __add__(self, other: object) -> AgentGroup:
        if isinstance(other, Agent):
            return AgentGroup((*self.agents, other))
        if isinstance(other, AgentGroup):
            return AgentGroup((*self.agents, *other.agents))
        return NotImplemented

    def __rshift__(self, rate: object) -> PendingReaction:
        if isinstance(rate, Real) and not isinstance(rate, bool):
            return PendingReaction(self.agents, float(rate))
        return NotImplemented


@dataclass(frozen=True)
class PendingReaction:
    """Reactants and a rate, waiting for their products."""

    reactants: tuple[Agent, ...]
    rate: float

    def __rshift__(self, products: object) -> Reaction:
        if isinstance(products, Agent):
            return Reaction(self.reactants, self.rate, (products,))
        if isinstance(products, AgentGroup):
            return Reaction(self.reactants, self.rate, products.agents)
        return NotImplemented