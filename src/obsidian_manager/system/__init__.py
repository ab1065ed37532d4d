"""OS-facing helpers: launchd, sleepwatcher plist and the Obsidian app."""
