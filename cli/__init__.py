"""Command line interface for midireader."""
