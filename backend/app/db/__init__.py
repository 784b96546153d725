"""Database Primitives - declarative base and shared column types.

Invariants:
    - Engine and sessions live in infrastructure/database.py, never here
"""
