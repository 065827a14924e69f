"""Configuration, logging, error types and flat-file storage."""
