"""Property-based tests for the promise recorder.

Invariants checked for ALL generated inputs: handle allocation, payload
identity, tree composition, and the tracker matching a reference model.
"""
