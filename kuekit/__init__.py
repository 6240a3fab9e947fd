"""Helpers for web back ends: errors, conversion, pagination, response shapes, hashing, encryption, logging and HTTP."""

__version__ = "0.1.0"