# -*- coding: utf-8 -*-
"""
Presentation helpers for the 2048 game: key bindings, text rendering and a matplotlib window.

`WindowBoard` is not imported here so that the engine doesn't load matplotlib.
"""

from .keys import KEY_BINDINGS, key_to_direction
from .render import render_board

__all__ = ["KEY_BINDINGS", "key_to_direction", "render_board"]
