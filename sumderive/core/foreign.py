# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Foreign type/element model consumed by the derivation core.

The host environment owns the real program model (types, declarations,
packages). The core never constructs or mutates those nodes; it only asks a
`ForeignModel` questions about them. Nodes are therefore plain `Any` handles
here, the same way the checker treats `TypeId`s as opaque.

Foreign variant tags are open-ended: a host may report tags the core has
never heard of. `classify_type_tag`/`classify_element_tag` fold every tag into
the small closed `TypeKind`/`ElementKind` enums once, at the boundary, and
everything past that boundary matches on the internal kinds only.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Mapping, Protocol, Sequence


ForeignType = Any  # opaque type node supplied by the host
ForeignElement = Any  # opaque declaration/element node supplied by the host


class TypeKind(Enum):
	"""Closed set of type variants the core distinguishes."""

	DECLARED = auto()
	TYPEVAR = auto()
	PRIMITIVE = auto()
	ARRAY = auto()
	VOID = auto()
	OTHER = auto()


class ElementKind(Enum):
	"""Closed set of element variants the core distinguishes."""

	PACKAGE = auto()
	TYPE = auto()
	EXECUTABLE = auto()
	TYPE_PARAMETER = auto()
	VARIABLE = auto()
	OTHER = auto()


# Upper-cased foreign tag name -> internal kind. Anything missing is OTHER.
TYPE_TAG_ALIASES: Mapping[str, TypeKind] = {
	"DECLARED": TypeKind.DECLARED,
	"CLASS": TypeKind.DECLARED,
	"TYPEVAR": TypeKind.TYPEVAR,
	"TYPE_VARIABLE": TypeKind.TYPEVAR,
	"PRIMITIVE": TypeKind.PRIMITIVE,
	"BOOLEAN": TypeKind.PRIMITIVE,
	"BYTE": TypeKind.PRIMITIVE,
	"SHORT": TypeKind.PRIMITIVE,
	"INT": TypeKind.PRIMITIVE,
	"LONG": TypeKind.PRIMITIVE,
	"CHAR": TypeKind.PRIMITIVE,
	"FLOAT": TypeKind.PRIMITIVE,
	"DOUBLE": TypeKind.PRIMITIVE,
	"ARRAY": TypeKind.ARRAY,
	"VOID": TypeKind.VOID,
}

ELEMENT_TAG_ALIASES: Mapping[str, ElementKind] = {
	"PACKAGE": ElementKind.PACKAGE,
	"MODULE_PACKAGE": ElementKind.PACKAGE,
	"TYPE": ElementKind.TYPE,
	"CLASS": ElementKind.TYPE,
	"INTERFACE": ElementKind.TYPE,
	"ENUM": ElementKind.TYPE,
	"ANNOTATION_TYPE": ElementKind.TYPE,
	"RECORD": ElementKind.TYPE,
	"EXECUTABLE": ElementKind.EXECUTABLE,
	"METHOD": ElementKind.EXECUTABLE,
	"CONSTRUCTOR": ElementKind.EXECUTABLE,
	"STATIC_INIT": ElementKind.EXECUTABLE,
	"INSTANCE_INIT": ElementKind.EXECUTABLE,
	"TYPE_PARAMETER": ElementKind.TYPE_PARAMETER,
	"VARIABLE": ElementKind.VARIABLE,
	"PARAMETER": ElementKind.VARIABLE,
	"FIELD": ElementKind.VARIABLE,
	"LOCAL_VARIABLE": ElementKind.VARIABLE,
	"ENUM_CONSTANT": ElementKind.VARIABLE,
	"RESOURCE_VARIABLE": ElementKind.VARIABLE,
	"EXCEPTION_PARAMETER": ElementKind.VARIABLE,
}


def _tag_key(tag: object) -> str:
	# Enum-valued foreign tags are matched by member name, everything else by
	# its string form.
	if isinstance(tag, Enum):
		return tag.name.upper()
	return str(tag).upper()


def classify_type_tag(tag: object) -> TypeKind:
	"""Fold a foreign type tag into a `TypeKind` (unknown tags -> OTHER)."""
	if isinstance(tag, TypeKind):
		return tag
	if tag is None:
		return TypeKind.OTHER
	return TYPE_TAG_ALIASES.get(_tag_key(tag), TypeKind.OTHER)


def classify_element_tag(tag: object) -> ElementKind:
	"""Fold a foreign element tag into an `ElementKind` (unknown tags -> OTHER)."""
	if isinstance(tag, ElementKind):
		return tag
	if tag is None:
		return ElementKind.OTHER
	return ELEMENT_TAG_ALIASES.get(_tag_key(tag), ElementKind.OTHER)


class ForeignModel(Protocol):
	"""
	Queries the core needs from the host's program model.

	Implementations must be side-effect free from the core's point of view:
	every method is a read-only lookup on already-resolved nodes. Shared caches
	behind `is_same_type` are the host's business.
	"""

	def type_tag(self, ty: ForeignType) -> object:
		"""Return the host's variant tag for a type node."""
		...

	def element_tag(self, elem: ForeignElement) -> object:
		"""Return the host's variant tag for an element node."""
		...

	def enclosing_element(self, elem: ForeignElement) -> ForeignElement | None:
		"""Return the immediately enclosing element (None only above packages)."""
		...

	def is_same_type(self, a: ForeignType, b: ForeignType) -> bool:
		"""Type identity as defined by the host type system (not by name)."""
		...

	def boxed_type(self, primitive: ForeignType) -> ForeignType:
		"""Return the reference type boxing a primitive type."""
		...

	def element_of(self, ty: ForeignType) -> ForeignElement:
		"""Return the declaring element of a declared type or type variable."""
		...

	def type_arguments(self, ty: ForeignType) -> Sequence[ForeignType]:
		"""Return the type arguments of a declared type (may be empty)."""
		...

	def component_type(self, ty: ForeignType) -> ForeignType:
		"""Return the component type of an array type."""
		...

	def primitive_name(self, ty: ForeignType) -> str:
		"""Return the keyword naming a primitive type (`int`, `boolean`, ...)."""
		...

	def type_of(self, elem: ForeignElement) -> ForeignType:
		"""Return the type an element declares (its `asType`)."""
		...

	def simple_name(self, elem: ForeignElement) -> str:
		...

	def qualified_name(self, elem: ForeignElement) -> str:
		...

	def type_parameters(self, elem: ForeignElement) -> Sequence[ForeignElement]:
		"""Return the type-parameter elements of a generic type or executable."""
		...

	def enclosed_elements(self, elem: ForeignElement) -> Sequence[ForeignElement]:
		...

	def modifiers(self, elem: ForeignElement) -> frozenset[str]:
		"""Return lower-case modifier keywords (`public`, `abstract`, ...)."""
		...

	def return_type(self, executable: ForeignElement) -> ForeignType:
		...

	def parameters(self, executable: ForeignElement) -> Sequence[ForeignElement]:
		"""Return the parameter (variable) elements of an executable."""
		...


__all__ = [
	"ForeignType",
	"ForeignElement",
	"TypeKind",
	"ElementKind",
	"TYPE_TAG_ALIASES",
	"ELEMENT_TAG_ALIASES",
	"classify_type_tag",
	"classify_element_tag",
	"ForeignModel",
]
