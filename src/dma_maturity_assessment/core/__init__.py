"""Core scoring domain. No FastAPI or settings imports belong here."""
