"""Dump archive handling.

This module turns the downloaded bzip2 archive into the plain SQL
stream consumed by the database client.
"""
