"""Predicates, aggregation and per-project iteration."""
