"""Configuration, logging, errors, database and application state."""
