"""Configuration: settings, constants, database and logging setup."""
