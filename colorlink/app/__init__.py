"""Host-facing session and application services."""
