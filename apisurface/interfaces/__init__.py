"""
Interfaces: entry points exposed to users (CLI).
"""
