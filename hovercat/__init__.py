"""Hovercat: a side-scrolling arcade game about a cat flying between pipes."""

__version__ = "1.0.0"