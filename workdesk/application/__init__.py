"""Application layer: use cases and pure helpers (duration, email templates)."""
