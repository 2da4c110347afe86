"""Algoan connector for the Bridge banking-data aggregator."""
