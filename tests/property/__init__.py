"""Property-based tests for AnalyzerFlow graph operations.

Hypothesis generates plugin catalogs, acyclic and cyclic, to check the
staging and layout invariants over a much wider range of inputs than the
example-based unit tests.
"""
