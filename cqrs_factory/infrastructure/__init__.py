"""Infrastructure package: buses and logging adapters."""
