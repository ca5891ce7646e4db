"""Command line interface for loosecat."""
