"""Tests for the connectfour package."""
