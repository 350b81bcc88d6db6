from .query import QueryOps

__all__ = ["QueryOps"]
