"""Core types, configuration, errors, and logging shared by all packages."""
