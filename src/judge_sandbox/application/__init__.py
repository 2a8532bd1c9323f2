"""
Application layer

Use cases built on the domain: code execution, validation and executor
selection.
"""
