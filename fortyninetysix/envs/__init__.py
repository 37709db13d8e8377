# -*- coding: utf-8 -*-
"""
Python implementation of the 4096 game.

This module provides the `FortyNinetySix` class, which holds a game session on top of the board engine.
"""

from .fortyninetysix import FortyNinetySix

__all__ = ["FortyNinetySix"]
