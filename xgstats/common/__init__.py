"""Shared helpers: logging, lenient parsing, Playwright rendering."""
