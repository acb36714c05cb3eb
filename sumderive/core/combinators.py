# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Small list/optional helpers shared by the classifier, result and refinement code.

"Optional" here is plain `X | None`: absence is `None`. Callers that need to
store a legitimate `None` value should not route it through these helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


@dataclass(frozen=True)
class P2(Generic[A, B]):
	"""Ordered pair."""

	first: A
	second: B

	def match(self, f: Callable[[A, B], R]) -> R:
		return f(self.first, self.second)


def p2(first: A, second: B) -> P2[A, B]:
	return P2(first, second)


def fold(value: Optional[A], none: R, some: Callable[[A], R]) -> R:
	"""Return `some(value)` when present, `none` otherwise."""
	if value is None:
		return none
	return some(value)


def optional_as_list(value: Optional[A]) -> List[A]:
	return fold(value, [], lambda v: [v])


def only_one(xs: Sequence[A]) -> Optional[A]:
	"""Return the element of a one-element sequence; None for zero or many."""
	if len(xs) == 1:
		return xs[0]
	return None


def traverse_optional(xs: Sequence[A], f: Callable[[A], Optional[B]]) -> Optional[List[B]]:
	"""Map `f` over `xs`; None as soon as any application is absent."""
	out: List[B] = []
	for x in xs:
		y = f(x)
		if y is None:
			return None
		out.append(y)
	return out


def zip_pairs(as_: Sequence[A], bs: Sequence[B]) -> List[P2[A, B]]:
	"""Pair elements positionally, truncated to the shorter input."""
	return [P2(as_[i], bs[i]) for i in range(min(len(as_), len(bs)))]


__all__ = [
	"P2",
	"p2",
	"fold",
	"optional_as_list",
	"only_one",
	"traverse_optional",
	"zip_pairs",
]
