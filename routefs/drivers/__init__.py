"""Concrete implementations of routefs ports."""
