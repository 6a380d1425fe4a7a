"""Command-line interface for jsonesc."""
