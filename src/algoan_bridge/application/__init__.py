"""Application layer: webhook commands and Bridge-to-Algoan mapping."""
