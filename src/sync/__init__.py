"""Dump synchronization pipeline.

This module compares the remote and stored version markers and, on a
mismatch, drives the fetch, decompress, load, and marker-write stages.
"""
