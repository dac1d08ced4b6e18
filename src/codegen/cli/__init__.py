"""Command line interface (``codegen`` console script)."""
