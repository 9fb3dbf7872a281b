#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four game

Usage:
    python run.py play
    python run.py play --rows 6 --cols 7 --player1-color red --player2-color yellow
    python run.py play --debug_level debug
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
