"""
connectfour.interfaces - User interfaces for Connect Four

Interfaces translate user input into engine calls and render the results.
They hold no game logic of their own.
"""

# Don't import anything here to avoid circular imports
__all__ = []
