"""Coding-dojo katas, poker-hand scorers, a 2048 game and service helpers."""

__version__ = "0.1.0"