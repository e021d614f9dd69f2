"""Deterministic arena simulation of robots steered by agents, with a console view."""

__version__ = "0.1.0"