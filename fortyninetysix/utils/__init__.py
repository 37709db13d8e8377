# -*- coding: utf-8 -*-
"""
Collaborators of the game session: best-score stores and the game window.

The window is imported from ``fortyninetysix.utils.windows`` directly so that matplotlib is only
loaded when a window is opened.
"""

from .store import DEFAULT_STORAGE_KEY, MappingScoreStore, MemoryScoreStore, ScoreStore

__all__ = ["DEFAULT_STORAGE_KEY", "MappingScoreStore", "MemoryScoreStore", "ScoreStore"]
