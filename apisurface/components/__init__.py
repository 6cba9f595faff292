"""
Components: domain logic over the symbol graph (walks, predicates, aggregation, report model).
"""
