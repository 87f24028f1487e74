"""Configuration, logging, error kinds and the database gateway."""
