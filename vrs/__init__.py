"""VRS academic resource sharing service."""
