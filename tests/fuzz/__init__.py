"""Fuzz testing infrastructure for graphcycles.

This package contains:
- shadow_cycles: Brute-force reference enumerator for differential testing
- test_cycles_oracle: State machine fuzzer comparing graphcycles to the shadow
- test_deep_graphs: Boundary tests for long paths and large components

Python 3.13+.
"""
