"""HTTP clients built on httpx."""
