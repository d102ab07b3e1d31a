"""
Core domain models, integer safeguards, and payload contracts.

Everything here is pure and independent of I/O beyond reading the bundled
JSON Schema files.
"""
