"""Stochastic simulation of chemical reaction networks in a vessel, with plotting of the results."""

__version__ = "0.1.0"