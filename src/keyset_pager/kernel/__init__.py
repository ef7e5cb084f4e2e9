"""Kernel – errors, ordering and keyset expressions. No backend dependencies."""
