"""Benchmarks comparing native and generic dispatch per precision tier."""
