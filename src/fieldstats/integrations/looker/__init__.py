from .query_runner import LookerQueryRunner

__all__ = ["LookerQueryRunner"]
