"""User interfaces for Obsidian Manager."""
