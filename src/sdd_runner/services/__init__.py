"""Command execution services."""
