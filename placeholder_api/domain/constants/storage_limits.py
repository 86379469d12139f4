"""Limits imposed by the SQLite store"""

# Largest value an SQLite INTEGER column (and bound parameter) can hold
MAX_STORE_INTEGER = 2**63 - 1
