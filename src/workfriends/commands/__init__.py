"""Subcommands of the ``workfriends`` CLI and their shared plumbing."""
