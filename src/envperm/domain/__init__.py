"""Domain layer — pure export-line formatting.

This layer has no I/O. It must never import from infrastructure,
services, commands, or output.
"""
