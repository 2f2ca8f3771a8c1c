"""Test suite for airbnbapi.

Test structure:
- unit/: Unit tests - settings, errors, header builder, logging, base client
- integration/: Endpoint clients and public functions against mocked HTTP

HTTP is mocked with pytest-httpx; no test talks to the real upstream.
"""
