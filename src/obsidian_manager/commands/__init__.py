"""Command handlers. Each returns a process exit code; none exits itself."""
