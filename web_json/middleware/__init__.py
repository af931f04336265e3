"""Middleware components for apps using the JSON helpers.

This package contains middleware for cross-cutting concerns:
- error_handler.py: Translate JSON helper errors into JSON error responses
"""
