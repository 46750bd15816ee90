"""Shared console and logging helpers for the command-line tools."""
