"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Default service endpoints and named constants
- exceptions: Custom exception hierarchy
"""
