"""Test fixtures for the disk client and the namespace browser.

- gateways: In-memory namespace gateways for browsing core tests
- backend: Stub FastAPI backend for end-to-end client tests
"""
