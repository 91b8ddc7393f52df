"""Command line interface for cabinet pricing."""
