# -*- coding: utf-8 -*-
"""
4096: a sliding-tile merge puzzle.

The board engine lives in `fortyninetysix.core`, the game session in `fortyninetysix.envs`.
"""

__version__ = "1.0.0"
