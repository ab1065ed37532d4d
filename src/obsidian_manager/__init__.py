"""Obsidian Manager - keep Obsidian in step with sleep/wake and roll daily notes."""

__version__ = "1.0.0"
