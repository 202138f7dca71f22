"""
Stream+ Test Suite

Test Categories:
- unit/: Fast, isolated unit tests
- integration/: HTTP-level tests against the FastAPI app with fake upstreams
- fixtures/: Shared test doubles and canned upstream payloads
"""
