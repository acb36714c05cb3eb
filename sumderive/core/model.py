# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Data-model values shared by the derivation pipeline and code generation.

Foreign nodes (types, elements) are stored as-is; identity questions about
them always go back to the `ForeignModel`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from sumderive.core.classify import as_declared_type, as_type_element, as_type_variable
from sumderive.core.combinators import traverse_optional
from sumderive.core.foreign import ForeignElement, ForeignModel, ForeignType
from sumderive.core.type_name import ClassName


@dataclass(frozen=True)
class DataArgument:
	"""A field of a data constructor."""

	field_name: str
	type: Any


@dataclass(frozen=True)
class TypeConstructor:
	"""
	A named generic type and its type variables.

	Invariants:
	- `type_variables` is ordered (positional substitution depends on it);
	- no two entries are the same type according to the foreign model.
	Build through `type_constructor_of` to have the second one checked.
	"""

	type_element: ForeignElement
	declared_type: ForeignType
	type_variables: Tuple[ForeignType, ...] = ()

	def __post_init__(self) -> None:
		object.__setattr__(self, "type_variables", tuple(self.type_variables))


@dataclass(frozen=True)
class TypeRestriction:
	"""
	`restricted_type_variable` is known to equal `refinement_type`.

	`id_function` is the argument generated code receives as the witness of
	that equality (an identity function from the variable to the refinement).
	"""

	restricted_type_variable: ForeignType
	refinement_type: ForeignType
	id_function: DataArgument


@dataclass(frozen=True)
class DeriveContext:
	"""Where generated code goes: helpers are nested in the target class."""

	target_package: str
	target_class_name: str


def get_class_name(ctx: DeriveContext, class_name: str) -> ClassName:
	"""Return the name of generated class `class_name` nested in the target class."""
	return ClassName(ctx.target_package, (ctx.target_class_name, class_name))


def check_distinct_type_variables(model: ForeignModel, type_variables: Sequence[ForeignType]) -> None:
	"""Raise ValueError if two entries are the same type for the foreign model."""
	for i, tv in enumerate(type_variables):
		for other in type_variables[i + 1 :]:
			if model.is_same_type(tv, other):
				raise ValueError(f"duplicate type variable {tv!r} in type constructor")


def type_constructor_of(model: ForeignModel, type_element: ForeignElement) -> TypeConstructor | None:
	"""
	Build the `TypeConstructor` of a class-like element.

	Returns None when `type_element` is not a type element or one of its type
	parameters does not declare a type variable.
	"""
	elem = as_type_element(model, type_element)
	if elem is None:
		return None
	declared = as_declared_type(model, model.type_of(elem))
	if declared is None:
		return None
	type_variables = traverse_optional(
		list(model.type_parameters(elem)),
		lambda param: as_type_variable(model, model.type_of(param)),
	)
	if type_variables is None:
		return None
	check_distinct_type_variables(model, type_variables)
	return TypeConstructor(type_element=elem, declared_type=declared, type_variables=tuple(type_variables))


__all__ = [
	"DataArgument",
	"TypeConstructor",
	"TypeRestriction",
	"DeriveContext",
	"get_class_name",
	"check_distinct_type_variables",
	"type_constructor_of",
]
