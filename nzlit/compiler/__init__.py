"""Configuration, pipeline orchestration and command line entry point."""
