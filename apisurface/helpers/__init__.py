"""
Helpers package: DTOs, exceptions and logging utilities shared by every layer.
"""
