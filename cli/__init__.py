"""Command line tools for loading airports into and querying the weather service."""
