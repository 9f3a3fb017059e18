"""Persistence services operating on a DatabaseManager."""
