"""Shared constants and logging setup."""
