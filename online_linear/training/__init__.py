"""
Online training engines.

Only the per-example loop lives here; data loading and
model persistence belong to the caller.
"""
