"""Configuration and mod-directory discovery."""
