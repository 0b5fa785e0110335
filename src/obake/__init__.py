"""Obake: start and stop audio setups of interfaces and shapes."""

__version__ = "0.1.0"
