"""Configuration — settings overrides and project root resolution."""
