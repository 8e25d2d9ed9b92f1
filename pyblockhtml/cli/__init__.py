"""Command line interface for pyblockhtml."""
