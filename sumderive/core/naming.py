# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Identifier and argument-list string helpers for generated code."""

from __future__ import annotations

from itertools import chain
from typing import Iterable, Sequence

from sumderive.core.foreign import ForeignModel
from sumderive.core.model import DataArgument, TypeRestriction


def capitalize(s: str) -> str:
	"""Upper-case the first character only (`str.capitalize` lowers the rest)."""
	return s[:1].upper() + s[1:]


def uncapitalize(s: str) -> str:
	return s[:1].lower() + s[1:]


def join_strings(strings: Iterable[str], joiner: str) -> str:
	return joiner.join(strings)


def join_strings_as_arguments(arguments: Iterable[str]) -> str:
	return join_strings(arguments, ", ")


def as_arguments_string(
	model: ForeignModel,
	arguments: Sequence[DataArgument],
	restrictions: Sequence[TypeRestriction] = (),
) -> str:
	"""
	Render the call arguments forwarding a constructor's fields.

	Fields become `this.<field>`; each restriction contributes an identity
	lambda named after its restricted type variable, e.g. `this.value, t -> t`
	for a restriction on `T`.
	"""
	fields = (f"this.{arg.field_name}" for arg in arguments)
	witnesses = (f"{name} -> {name}" for name in (_variable_name(model, tr) for tr in restrictions))
	return join_strings_as_arguments(chain(fields, witnesses))


def _variable_name(model: ForeignModel, restriction: TypeRestriction) -> str:
	return uncapitalize(model.simple_name(model.element_of(restriction.restricted_type_variable)))


def as_lambda_parameters_string(
	arguments: Sequence[DataArgument],
	restrictions: Sequence[TypeRestriction] = (),
) -> str:
	"""Render the parameter list of a lambda receiving fields and witnesses."""
	return join_strings_as_arguments(
		chain(
			(arg.field_name for arg in arguments),
			(tr.id_function.field_name for tr in restrictions),
		)
	)


__all__ = [
	"capitalize",
	"uncapitalize",
	"join_strings",
	"join_strings_as_arguments",
	"as_arguments_string",
	"as_lambda_parameters_string",
]
