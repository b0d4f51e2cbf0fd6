"""Injectable integrations with the outside world."""
