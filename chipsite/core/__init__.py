"""Core models shared across chipsite."""
