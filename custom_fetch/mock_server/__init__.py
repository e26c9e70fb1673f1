"""Mock HTTP server for the custom_fetch integration tests.

Run it with ``python run.py`` or ``uvicorn custom_fetch.mock_server.main:app``.
"""
