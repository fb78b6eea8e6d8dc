"""
Tests for the IPv6 canonicalization and numeral conversion engine.
"""
