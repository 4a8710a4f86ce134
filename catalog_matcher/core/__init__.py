"""Core infrastructure (config, logging, exceptions)."""
