"""Configuration, database, security and error primitives."""
