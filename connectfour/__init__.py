"""
connectfour - Connect Four rules engine

This package provides the board representation, move legality, turn
alternation and win/tie detection for two-player Connect Four, plus a small
terminal interface for playing it.
"""

# Version number
__version__ = '0.1.0'
