# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type references as they appear in generated signatures.

These are the values the refinement engine produces and the emission backend
renders. They are deliberately independent of the foreign model: a
`TypeName` is a frozen description (`demo.Option<java.lang.String>`) that
can be compared, hashed and printed without a live host model.

`type_name_of`/`class_name_of` are the single bridge from foreign nodes to
type names; both go through the variant classifier.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from sumderive.core.classify import as_type_element, get_package, type_kind
from sumderive.core.foreign import ForeignElement, ForeignModel, ForeignType, TypeKind


class TypeName:
	"""Base class of rendered type references."""


@dataclass(frozen=True)
class ClassName(TypeName):
	"""
	Fully-qualified name of a (possibly nested) class.

	`simple_names` runs from the top-level class inwards:
	`ClassName("demo", ("Outer", "Inner"))` renders as `demo.Outer.Inner`.
	An empty `package` denotes the unnamed package.
	"""

	package: str
	simple_names: Tuple[str, ...]

	def __post_init__(self) -> None:
		object.__setattr__(self, "simple_names", tuple(self.simple_names))
		if not self.simple_names:
			raise ValueError("ClassName needs at least one simple name")

	@staticmethod
	def get(package: str, simple_name: str, *nested: str) -> "ClassName":
		return ClassName(package, (simple_name, *nested))

	@staticmethod
	def best_guess(qualified: str) -> "ClassName":
		"""
		Split `a.b.Outer.Inner` into package and simple names.

		Package segments are the leading lower-case ones; if every segment is
		lower-case the last one is taken as the class name.
		"""
		parts = qualified.split(".")
		if not all(part.isidentifier() for part in parts):
			raise ValueError(f"not a qualified class name: {qualified!r}")
		split = next((i for i, part in enumerate(parts) if part[:1].isupper()), len(parts) - 1)
		return ClassName(".".join(parts[:split]), tuple(parts[split:]))

	@property
	def simple_name(self) -> str:
		return self.simple_names[-1]

	@property
	def canonical_name(self) -> str:
		names = ".".join(self.simple_names)
		return f"{self.package}.{names}" if self.package else names

	def enclosing_class_name(self) -> "ClassName | None":
		if len(self.simple_names) == 1:
			return None
		return ClassName(self.package, self.simple_names[:-1])

	def nested_class(self, name: str) -> "ClassName":
		return ClassName(self.package, (*self.simple_names, name))

	def peer_class(self, name: str) -> "ClassName":
		return ClassName(self.package, (*self.simple_names[:-1], name))

	def __str__(self) -> str:
		return self.canonical_name


@dataclass(frozen=True)
class ParameterizedTypeName(TypeName):
	"""A class name applied to one or more type arguments."""

	raw_type: ClassName
	type_arguments: Tuple[TypeName, ...]

	def __post_init__(self) -> None:
		object.__setattr__(self, "type_arguments", tuple(self.type_arguments))
		if not self.type_arguments:
			raise ValueError(f"no type arguments for {self.raw_type}")
		for arg in self.type_arguments:
			if isinstance(arg, PrimitiveTypeName):
				raise ValueError(f"primitive {arg} cannot be a type argument of {self.raw_type}")

	def __str__(self) -> str:
		args = ", ".join(str(arg) for arg in self.type_arguments)
		return f"{self.raw_type}<{args}>"


@dataclass(frozen=True)
class TypeVariableName(TypeName):
	name: str
	bounds: Tuple[TypeName, ...] = ()

	def __str__(self) -> str:
		return self.name


@dataclass(frozen=True)
class PrimitiveTypeName(TypeName):
	keyword: str

	def __str__(self) -> str:
		return self.keyword


@dataclass(frozen=True)
class ArrayTypeName(TypeName):
	component_type: TypeName

	def __str__(self) -> str:
		return f"{self.component_type}[]"


def class_name_of(model: ForeignModel, type_element: ForeignElement) -> ClassName:
	"""Build the `ClassName` of a type element (nested classes included)."""
	names: list[str] = []
	current = type_element
	while as_type_element(model, current) is not None:
		names.append(model.simple_name(current))
		current = model.enclosing_element(current)
	if not names:
		raise TypeError(f"{type_element!r} is not a type element")
	package = get_package(model, current)
	return ClassName(model.qualified_name(package), tuple(reversed(names)))


def type_name_of(model: ForeignModel, ty: ForeignType) -> TypeName:
	"""
	Convert a foreign type into a `TypeName`.

	Only nameable kinds are accepted (declared, type variable, primitive,
	array, and `void` for return types). Anything else cannot appear in a
	generated signature and raises `TypeError`.
	"""
	kind = type_kind(model, ty)
	if kind is TypeKind.DECLARED:
		raw = class_name_of(model, model.element_of(ty))
		args = tuple(type_name_of(model, arg) for arg in model.type_arguments(ty))
		return ParameterizedTypeName(raw, args) if args else raw
	if kind is TypeKind.TYPEVAR:
		return TypeVariableName(model.simple_name(model.element_of(ty)))
	if kind is TypeKind.PRIMITIVE:
		return PrimitiveTypeName(model.primitive_name(ty))
	if kind is TypeKind.ARRAY:
		return ArrayTypeName(type_name_of(model, model.component_type(ty)))
	if kind is TypeKind.VOID:
		return PrimitiveTypeName("void")
	raise TypeError(f"type {ty!r} ({kind.name}) has no type name")


__all__ = [
	"TypeName",
	"ClassName",
	"ParameterizedTypeName",
	"TypeVariableName",
	"PrimitiveTypeName",
	"ArrayTypeName",
	"class_name_of",
	"type_name_of",
]
