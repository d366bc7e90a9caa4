"""Command line interface for commitpick."""
