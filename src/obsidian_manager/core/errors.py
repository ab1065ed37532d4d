"""Error taxonomy for Obsidian Manager."""


class ObsidianManagerError(Exception):
    """Base error for all expected failures."""


class ValidationError(ObsidianManagerError):
    """Raised when user input is missing or malformed."""


class NotFoundError(ObsidianManagerError):
    """Raised when a required note does not exist."""


class DirectoryNotFoundError(ObsidianManagerError):
    """Raised when the target directory for a note does not exist."""


class NoteIOError(ObsidianManagerError):
    """Raised when a note cannot be read from or written to disk."""


class AppControlError(ObsidianManagerError):
    """Raised when the Obsidian app cannot be started."""


class LaunchctlError(ObsidianManagerError):
    """Raised when a launchctl command fails."""
