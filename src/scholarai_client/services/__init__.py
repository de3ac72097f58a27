"""
Service facades, one module per remote capability.

Modules are exported rather than functions because the gateway and the
research service share operation names (e.g. create_document).
"""

from . import assistance, documents, extraction, library, research, scholarbot, summary

__all__ = [
    "assistance",
    "documents",
    "extraction",
    "library",
    "research",
    "scholarbot",
    "summary",
]
