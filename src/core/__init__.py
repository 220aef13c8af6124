"""Configuration, logging, authentication and HTTP middleware."""
