"""HTTP layer — FastAPI app exposing the code tools."""
