"""Classroom Q&A board: REST API, persistence layer and polling client."""

__version__ = "1.0.0"
