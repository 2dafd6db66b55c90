"""Runnable examples of metatags."""
