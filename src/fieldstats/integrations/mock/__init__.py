from .query_runner import MockQueryRunner

__all__ = ["MockQueryRunner"]
