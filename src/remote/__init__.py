"""Remote source access.

This module fetches the published version marker and the compressed
dump archive over HTTP for the sync pipeline.
"""
