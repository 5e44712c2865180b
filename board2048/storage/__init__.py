# -*- coding: utf-8 -*-
"""
Best-score persistence collaborators.

Every store exposes ``load_best_score`` and ``save_best_score``; storage failures never leave
the store.
"""

from .best_score import BestScoreStore, JsonFileStore, MemoryStore, NullStore

__all__ = ["BestScoreStore", "MemoryStore", "NullStore", "JsonFileStore"]
