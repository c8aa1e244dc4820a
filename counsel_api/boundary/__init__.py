"""Boundary adapters for external systems: relational store and completion service."""
