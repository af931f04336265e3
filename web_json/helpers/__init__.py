"""Helper utilities for JSON requests and responses.

This package contains the three JSON helpers:
- request_parser.py: Decode a JSON payload from an incoming request
- response_formatter.py: Build JSON success and error responses
"""
