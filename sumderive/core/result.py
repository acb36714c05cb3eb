# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Two-variant outcome of a derivation step and fail-fast aggregation.

`DeriveResult` is either a success carrying a value or an error carrying a
`DeriveMessage`. The only way to look inside is `match`, which takes one
handler per variant, so no caller can forget the error case.

`traverse_results` folds many outcomes left to right and stops at the first
error. The batch result is "all values, in order" or "the first error";
there is no partial success and no merging of several errors.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, TypeVar

from sumderive.core.diagnostics import DeriveMessage

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


class DeriveResult(ABC, Generic[A]):
	"""Outcome of a fallible derivation step."""

	@staticmethod
	def success(value: A) -> "DeriveResult[A]":
		return _Success(value)

	@staticmethod
	def error(message: DeriveMessage) -> "DeriveResult[A]":
		return _Error(message)

	@abstractmethod
	def match(self, on_error: Callable[[DeriveMessage], R], on_success: Callable[[A], R]) -> R:
		"""Eliminate the result by supplying a handler for each variant."""
		raise NotImplementedError

	def map(self, f: Callable[[A], B]) -> "DeriveResult[B]":
		return self.match(DeriveResult.error, lambda value: DeriveResult.success(f(value)))

	def bind(self, f: Callable[[A], "DeriveResult[B]"]) -> "DeriveResult[B]":
		"""Chain another fallible step; errors pass through untouched."""
		return self.match(DeriveResult.error, f)

	def map_error(self, f: Callable[[DeriveMessage], DeriveMessage]) -> "DeriveResult[A]":
		return self.match(lambda message: DeriveResult.error(f(message)), DeriveResult.success)

	def is_success(self) -> bool:
		return self.match(lambda _message: False, lambda _value: True)


@dataclass(frozen=True)
class _Success(DeriveResult[A]):
	value: A

	def match(self, on_error: Callable[[DeriveMessage], R], on_success: Callable[[A], R]) -> R:
		return on_success(self.value)


@dataclass(frozen=True)
class _Error(DeriveResult[A]):
	message: DeriveMessage

	def match(self, on_error: Callable[[DeriveMessage], R], on_success: Callable[[A], R]) -> R:
		return on_error(self.message)


_COLLECTED = object()  # marks a success already appended by `_collect`


def _collect(values: List[A], value: A) -> object:
	values.append(value)
	return _COLLECTED


def traverse_results(outcomes: Iterable[DeriveResult[A]]) -> DeriveResult[List[A]]:
	"""
	Reduce outcomes to one: all values in order, or the first error.

	`outcomes` is consumed in order and is not advanced past the first error,
	so a lazy iterable never evaluates the steps after a failure.
	"""
	values: List[A] = []
	for outcome in outcomes:
		failure = outcome.match(lambda message: message, lambda value: _collect(values, value))
		if failure is not _COLLECTED:
			return DeriveResult.error(failure)
	return DeriveResult.success(values)


def traverse_results_with(items: Iterable[A], f: Callable[[A], DeriveResult[B]]) -> DeriveResult[List[B]]:
	"""`traverse_results` over `f` applied to each item, lazily and in order."""
	return traverse_results(f(item) for item in items)


__all__ = ["DeriveResult", "traverse_results", "traverse_results_with"]
