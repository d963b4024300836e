"""Task management REST API with per-user ownership."""
