"""Typed models, async resolvers and a field-level schema for a space trading game HTTP API."""

__version__ = "0.0.1"