# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from sumderive.core.diagnostics import DeriveMessage
from sumderive.core.result import DeriveResult, traverse_results, traverse_results_with


def test_match_dispatches_on_variant():
	msg = DeriveMessage("no constructor found")
	ok = DeriveResult.success(3)
	err = DeriveResult.error(msg)

	assert ok.match(lambda m: f"error: {m.message}", lambda v: f"value: {v}") == "value: 3"
	assert err.match(lambda m: f"error: {m.message}", lambda v: f"value: {v}") == "error: no constructor found"


def test_bare_result_cannot_be_built():
	with pytest.raises(TypeError):
		DeriveResult()


def test_traverse_empty_is_success_of_empty_list():
	assert traverse_results([]) == DeriveResult.success([])


def test_traverse_all_successes_keeps_order():
	outcomes = [DeriveResult.success(1), DeriveResult.success(2), DeriveResult.success(3)]
	assert traverse_results(outcomes) == DeriveResult.success([1, 2, 3])


def test_traverse_returns_first_error():
	first = DeriveMessage("first", code="E1")
	second = DeriveMessage("second", code="E2")
	outcomes = [DeriveResult.success(1), DeriveResult.error(first), DeriveResult.success(3), DeriveResult.error(second)]
	assert traverse_results(outcomes) == DeriveResult.error(first)


def test_traverse_with_stops_evaluating_after_error():
	msg = DeriveMessage("step 2 failed")
	evaluated = []

	def step(i):
		evaluated.append(i)
		if i == 2:
			return DeriveResult.error(msg)
		return DeriveResult.success(i * 10)

	assert traverse_results_with([1, 2, 3], step) == DeriveResult.error(msg)
	assert evaluated == [1, 2]


def test_traverse_with_collects_mapped_values():
	res = traverse_results_with(["a", "bb"], lambda s: DeriveResult.success(len(s)))
	assert res == DeriveResult.success([1, 2])


def test_traverse_passes_message_through_unchanged():
	# Any payload is threaded through as-is.
	payload = object()
	res = traverse_results([DeriveResult.error(payload)])
	assert res.match(lambda m: m, lambda _v: None) is payload


def test_map_bind_and_map_error():
	msg = DeriveMessage("boom")
	assert DeriveResult.success(2).map(lambda v: v + 1) == DeriveResult.success(3)
	assert DeriveResult.error(msg).map(lambda v: v + 1) == DeriveResult.error(msg)

	assert DeriveResult.success(2).bind(lambda v: DeriveResult.error(msg)) == DeriveResult.error(msg)
	assert DeriveResult.success(2).bind(lambda v: DeriveResult.success(v * 2)) == DeriveResult.success(4)

	noted = DeriveResult.error(msg).map_error(lambda m: m.with_note("while deriving Option"))
	assert noted == DeriveResult.error(DeriveMessage("boom", notes=("while deriving Option",)))
	assert DeriveResult.success(1).map_error(lambda m: m.with_note("x")) == DeriveResult.success(1)


def test_is_success():
	assert DeriveResult.success(None).is_success()
	assert not DeriveResult.error(DeriveMessage("nope")).is_success()


def test_derive_message_helpers_return_copies():
	msg = DeriveMessage("bad field")
	attached = msg.with_element("elem").with_note("first").with_note("second")
	assert attached.element == "elem"
	assert attached.notes == ("first", "second")
	assert attached.severity == "error"
	assert msg.notes == ()
	assert msg.element is None
