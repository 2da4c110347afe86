"""Infrastructure layer: HTTP adapters for Algoan and Bridge."""
