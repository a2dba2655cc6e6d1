"""Ranking criteria, typo-tolerant matching and query rewriting for full-text search."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "number",
    "distinct_map",
    "levenshtein",
    "dfa",
    "query_enhancer",
    "criterion",
    "exactness",
    "typos",
    "proximity",
    "position",
    "criteria",
]