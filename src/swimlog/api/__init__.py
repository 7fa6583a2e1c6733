"""HTTP API for swimlog."""
