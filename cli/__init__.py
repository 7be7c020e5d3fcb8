"""Command line entry points for emoji-catalog."""
