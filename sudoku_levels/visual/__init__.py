"""Visualization module for boards and run summaries."""

from .visualizer import Visualizer

__all__ = ["Visualizer"]
