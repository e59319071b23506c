"""Test suite for the skill directory."""
