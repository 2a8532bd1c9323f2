"""
Domain Layer

Value objects, entities, the language registry, ports and pure services.
Nothing in this package performs I/O.
"""
