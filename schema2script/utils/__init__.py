"""Shared utilities: logging, error handling, storage configuration."""
