"""Configuration discovery, persisted settings and fixed constants."""
