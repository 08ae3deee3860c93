"""Shared helpers for book-summary."""
