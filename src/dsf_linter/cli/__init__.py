"""Command line interface for dsf-linter."""
