"""Pipeline orchestrator.

Sequences the three flyover stages:
1. Locate the caller's public address
2. Resolve the address to coordinates
3. Predict ISS passes for the coordinates
"""
