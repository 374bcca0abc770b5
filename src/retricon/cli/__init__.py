"""Command line interface for retricon."""
