"""Resiliency, concurrency and object-oriented design patterns as small, self-contained modules."""

__version__ = "0.1.0"