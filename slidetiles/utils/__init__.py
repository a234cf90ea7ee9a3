# -*- coding: utf-8 -*-
"""
Display helpers for the sliding-tile game.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
