"""Integration tests for the Confluence publisher.

These tests run complete publishes (library and CLI) against the in-memory
store from tests/helpers, with page content on the real filesystem under
pytest's tmp_path. No Confluence instance is needed.
"""
