"""Algoan domain package.

This package contains the canonical model owned by Algoan: webhook events,
service accounts and their subscriptions, Banks Users and the account and
transaction records pushed to them.
"""
