"""Core request building, transport and client implementation."""
