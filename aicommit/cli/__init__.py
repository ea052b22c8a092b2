"""Command-line interface for aicommit."""
