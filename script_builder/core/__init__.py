"""Configuration and application wiring."""
