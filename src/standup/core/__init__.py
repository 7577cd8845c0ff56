"""Configuration and logging plumbing shared by the CLI and the library."""
