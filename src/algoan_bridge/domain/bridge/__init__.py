"""Bridge domain package.

Raw account and transaction records as served by the Bridge aggregation
API, and the port the connector talks to Bridge through.
"""
