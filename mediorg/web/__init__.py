"""Interface HTTP (FastAPI)."""
