"""Configuration for the skill directory."""
