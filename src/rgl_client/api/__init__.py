from .client import MAX_QUERY_COUNT, RglClient, validate_query

__all__ = ["MAX_QUERY_COUNT", "RglClient", "validate_query"]
