"""HTTP API receiving Algoan webhooks."""
