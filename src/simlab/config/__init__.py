"""
Configuration for the simulation engine.
"""

from .config_loader import SimLabConfig

__all__ = ["SimLabConfig"]
