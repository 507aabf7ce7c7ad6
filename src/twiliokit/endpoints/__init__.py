"""
REST endpoint descriptors.

Keep package import side-effects to a minimum: submodules import each other
and the query builder, so nothing is re-exported here.
"""

__all__ = [
    "base",
    "calls",
    "streams",
    "accounts",
    "conferences",
    "applications",
]
