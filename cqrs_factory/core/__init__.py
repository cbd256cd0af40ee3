"""Core package: configuration, enums, result types and the container."""
