"""
Webhook payloads: voice request parameters and Media Stream messages.

Parsing only; request signatures are not verified here.
"""

__all__ = [
    "params",
    "streams",
]
