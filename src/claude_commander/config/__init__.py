"""Configuration for claude-commander: paths, messages, and runtime settings."""
