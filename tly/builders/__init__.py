from .query import build_query

__all__ = ["build_query"]
