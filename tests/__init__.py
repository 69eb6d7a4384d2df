"""Test suite for nativebindgen.

Test Structure:
- config/: Tests for configuration management
- domain/: Tests for the ABI models and the declaration walk
- infrastructure/: Tests for the libclang facade and logging
- application/: Tests for extraction orchestration and JSON output
- integration/: End-to-end extraction of real headers (needs libclang)

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m "not integration"  # Skip tests that need libclang
"""

__version__ = "0.1.0"
