"""CLI interface for tallybook."""
