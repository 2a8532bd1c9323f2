"""
Domain Ports

Port interfaces defining contracts between layers.
"""

from .executor_port import ICodeExecutorPort

__all__ = ["ICodeExecutorPort"]
