# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
sumderive: algebraic plumbing for deriving code from sum-type declarations.

Packages:
  core: variant narrowing, DeriveResult aggregation, type-variable refinement
  test_support: in-memory foreign model used by the test-suite
"""

__all__ = ["core", "test_support"]
