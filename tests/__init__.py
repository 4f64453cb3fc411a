"""Test suite for huecurve.

Test Structure:
- unit/accessibility/: contrast math, conversions, curves, suggestions, engine
- unit/caching/: curve cache backends
- unit/config/: configuration models and loader
- unit/utils/: logging, math and JSON helpers
- unit/cli/: command-line interface
- conftest.py: Shared fixtures
"""
