"""Command-line interface for selector_kit."""
