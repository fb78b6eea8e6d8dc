"""Batch canonicalization of IPv6 literal files."""
