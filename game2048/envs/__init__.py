# -*- coding: utf-8 -*-
"""
Stateful 2048 game.

This module provides the `Game2048` class, which owns the current game state and its random source.
"""

from .game import Game2048

__all__ = ["Game2048"]
