"""
Vault database connectivity check.

Resolves database connection parameters from a JSON config file plus
dynamic credentials issued by Vault, then opens one connection to verify
them.
"""

__version__ = "0.1.0"
