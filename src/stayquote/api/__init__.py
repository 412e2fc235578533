"""HTTP surface for the quote engine (FastAPI)."""
