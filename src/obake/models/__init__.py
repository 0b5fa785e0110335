"""Data models for obake configuration and setups."""

from .config import AudioConfig, AudioInterface, Config, DataConfig
from .launch import ShapeLaunch
from .setup import SetupDescriptor, SetupSection, ShapeConfig

__all__ = [
    "AudioConfig",
    "AudioInterface",
    "Config",
    "DataConfig",
    "SetupDescriptor",
    "SetupSection",
    "ShapeConfig",
    "ShapeLaunch",
]
