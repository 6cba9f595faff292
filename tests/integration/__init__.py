"""
Integration tests for the apisurface CLI.

These run the real commands end to end against graph documents written
to a temporary directory.
"""
