"""Configuration and logging for web_json."""
