"""Domain layer for tallybook application."""
