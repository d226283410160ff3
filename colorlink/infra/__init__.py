"""Runtime infrastructure: configuration, app-data paths and logging."""
