"""Routing use cases: normalize, score, classify, explain."""
