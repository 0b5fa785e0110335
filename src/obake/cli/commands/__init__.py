"""CLI commands for obake."""

from .interface import interface_group
from .setup import setup_group
from .shape import shape_group
from .unit import unit_group

__all__ = ["interface_group", "setup_group", "shape_group", "unit_group"]
