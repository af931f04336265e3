"""Route modules.

- demo.py: Example endpoints showing the JSON request helpers in use
"""
