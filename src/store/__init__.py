"""Local database access.

This module persists the applied version marker and loads dump files
into the target database through the external client.
"""
