"""
Workflows: one function per analysis run, orchestrating components.
"""
