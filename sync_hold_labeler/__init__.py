"""Keeps the sync-hold label on open GitHub issues in step with each distro's sync status."""
