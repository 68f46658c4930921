"""Trigger GitHub Actions repository dispatch events when content is published."""

__version__ = "1.0.0"
