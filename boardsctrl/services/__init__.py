"""Domain services: authentication and the legacy identity check."""
