# shellcrypt Test Suite
"""
Comprehensive test suite including:
- Unit tests (known-answer vectors for every primitive)
- Interoperability tests against the cryptography package
- Security tests (invalid inputs, error paths)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
