"""Global index engine instance to avoid circular imports."""

from .core.engine import IndexEngine

# Process-wide engine owned by the HTTP application
index_engine = IndexEngine()
