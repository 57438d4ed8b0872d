"""Turtle-graphics pen over a Canvas.

Modules:
    - turtle: Pen (mutable, chainable) and PenState (frozen snapshot)

Invariants:
    - Heading in degrees; 0 = +x, 90 = +y (down on screen)
    - Only forward/backward/move_to and flood_fill touch the canvas
    - set_state(get_state()) restores the pen exactly
"""

from .turtle import Pen, PenState

__all__ = ['Pen', 'PenState']
