"""
Diagnostic payload produced by derivation steps.

The core never inspects a `DeriveMessage`: it is carried inside
`DeriveResult.error(...)` and handed back to whichever sink the host uses to
report problems. Keeping it a small frozen value means it can be compared in
tests and shared freely between results.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class DeriveMessage:
	"""Represents a derivation diagnostic (error/warning/etc.)."""

	message: str
	# Foreign element the diagnostic is attached to, if any. Sinks use it to
	# point at the offending declaration in the user's sources.
	element: Any = None
	code: str | None = None
	severity: str = "error"
	notes: tuple[str, ...] = ()

	def with_note(self, note: str) -> "DeriveMessage":
		"""Return a copy with `note` appended."""
		return replace(self, notes=(*self.notes, note))

	def with_element(self, element: Any) -> "DeriveMessage":
		return replace(self, element=element)


__all__ = ["DeriveMessage"]
