"""Core infrastructure: settings, logging and the static dataset."""
