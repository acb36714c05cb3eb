# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Method discovery and override signatures.

Derived classes implement the abstract methods of the annotated type
(`match`, visitors, accessors). These helpers find those methods among an
element's members and describe the overriding declaration as a
`MethodSignature` value; rendering a full method body is the emission
backend's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from sumderive.core.classify import as_executable_element, as_type_variable
from sumderive.core.combinators import optional_as_list
from sumderive.core.foreign import ForeignElement, ForeignModel
from sumderive.core.type_name import TypeName, TypeVariableName, type_name_of

# Canonical modifier order used when rendering a declaration header.
MODIFIER_ORDER: Tuple[str, ...] = (
	"public",
	"protected",
	"private",
	"abstract",
	"default",
	"static",
	"final",
	"synchronized",
	"native",
	"strictfp",
)


@dataclass(frozen=True)
class ParameterSpec:
	name: str
	type: TypeName

	def __str__(self) -> str:
		return f"{self.type} {self.name}"


@dataclass(frozen=True)
class MethodSignature:
	"""Header of a generated method declaration."""

	name: str
	return_type: TypeName
	modifiers: Tuple[str, ...] = ()
	annotations: Tuple[str, ...] = ()
	type_variables: Tuple[TypeVariableName, ...] = ()
	parameters: Tuple[ParameterSpec, ...] = ()

	def __str__(self) -> str:
		parts: List[str] = [f"@{ann}" for ann in self.annotations]
		parts.extend(self.modifiers)
		if self.type_variables:
			parts.append("<" + ", ".join(str(tv) for tv in self.type_variables) + ">")
		params = ", ".join(str(p) for p in self.parameters)
		parts.append(f"{self.return_type} {self.name}({params})")
		return " ".join(parts)


def _ordered_modifiers(modifiers: Iterable[str]) -> Tuple[str, ...]:
	rank = {m: i for i, m in enumerate(MODIFIER_ORDER)}
	return tuple(sorted(modifiers, key=lambda m: (rank.get(m, len(rank)), m)))


def get_methods(model: ForeignModel, among: Iterable[ForeignElement]) -> List[ForeignElement]:
	"""Executable elements among `among`, in order."""
	methods: List[ForeignElement] = []
	for elem in among:
		methods.extend(optional_as_list(as_executable_element(model, elem)))
	return methods


def get_abstract_methods(model: ForeignModel, among: Iterable[ForeignElement]) -> List[ForeignElement]:
	return [m for m in get_methods(model, among) if "abstract" in model.modifiers(m)]


def override_method(model: ForeignModel, method: ForeignElement) -> MethodSignature:
	"""
	Describe a method overriding `method`.

	Same name, type variables, return type and parameters; `abstract` is
	dropped from the modifiers and an `Override` annotation is added. Type
	parameters whose type is not a type variable are skipped.
	"""
	type_variables = []
	for param in model.type_parameters(method):
		for tv in optional_as_list(as_type_variable(model, model.type_of(param))):
			type_variables.append(type_name_of(model, tv))
	return MethodSignature(
		name=model.simple_name(method),
		return_type=type_name_of(model, model.return_type(method)),
		modifiers=_ordered_modifiers(m for m in model.modifiers(method) if m != "abstract"),
		annotations=("Override",),
		type_variables=tuple(type_variables),
		parameters=tuple(
			ParameterSpec(model.simple_name(p), type_name_of(model, model.type_of(p)))
			for p in model.parameters(method)
		),
	)


__all__ = [
	"MODIFIER_ORDER",
	"ParameterSpec",
	"MethodSignature",
	"get_methods",
	"get_abstract_methods",
	"override_method",
]
