"""Command-line interface for headerseek."""
