"""Counseling chat API: session and message persistence with model-generated replies."""
