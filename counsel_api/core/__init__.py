"""Core domain utilities shared across layers."""
