"""Core infrastructure for unixfs: errors, paths and configuration."""
