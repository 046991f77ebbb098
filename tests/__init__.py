"""
Test suite for texsmith package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for the seeded stream, options, samplers, compositor and exporters
- Integration tests for complete generate/export workflows

Run with: pytest
"""
