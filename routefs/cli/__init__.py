"""Command-line interface for routefs."""
