# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Variant narrowing over foreign type/element nodes.

Each `as_*` helper is an independent probe: it returns the node unchanged
when the host reports exactly that variant and `None` otherwise. Probes never
raise for unrecognized variants, so callers can chain them freely, e.g.
`traverse_optional(params, lambda p: as_type_variable(model, model.type_of(p)))`.
"""

from __future__ import annotations

from sumderive.core.foreign import (
	ElementKind,
	ForeignElement,
	ForeignModel,
	ForeignType,
	TypeKind,
	classify_element_tag,
	classify_type_tag,
)


def type_kind(model: ForeignModel, ty: ForeignType) -> TypeKind:
	"""Classify a foreign type node into the internal `TypeKind`."""
	return classify_type_tag(model.type_tag(ty))


def element_kind(model: ForeignModel, elem: ForeignElement) -> ElementKind:
	"""Classify a foreign element node into the internal `ElementKind`."""
	return classify_element_tag(model.element_tag(elem))


def _narrow_type(model: ForeignModel, ty: ForeignType, kind: TypeKind) -> ForeignType | None:
	if ty is None:
		return None
	return ty if type_kind(model, ty) is kind else None


def _narrow_element(model: ForeignModel, elem: ForeignElement, kind: ElementKind) -> ForeignElement | None:
	if elem is None:
		return None
	return elem if element_kind(model, elem) is kind else None


def as_declared_type(model: ForeignModel, ty: ForeignType) -> ForeignType | None:
	return _narrow_type(model, ty, TypeKind.DECLARED)


def as_type_variable(model: ForeignModel, ty: ForeignType) -> ForeignType | None:
	return _narrow_type(model, ty, TypeKind.TYPEVAR)


def as_primitive_type(model: ForeignModel, ty: ForeignType) -> ForeignType | None:
	return _narrow_type(model, ty, TypeKind.PRIMITIVE)


def as_array_type(model: ForeignModel, ty: ForeignType) -> ForeignType | None:
	return _narrow_type(model, ty, TypeKind.ARRAY)


def as_boxed_type(model: ForeignModel, ty: ForeignType) -> ForeignType:
	"""Box a primitive type into its reference counterpart; pass others through."""
	prim = as_primitive_type(model, ty)
	if prim is None:
		return ty
	return model.boxed_type(prim)


def as_package_element(model: ForeignModel, elem: ForeignElement) -> ForeignElement | None:
	return _narrow_element(model, elem, ElementKind.PACKAGE)


def as_type_element(model: ForeignModel, elem: ForeignElement) -> ForeignElement | None:
	return _narrow_element(model, elem, ElementKind.TYPE)


def as_executable_element(model: ForeignModel, elem: ForeignElement) -> ForeignElement | None:
	return _narrow_element(model, elem, ElementKind.EXECUTABLE)


def as_type_parameter_element(model: ForeignModel, elem: ForeignElement) -> ForeignElement | None:
	return _narrow_element(model, elem, ElementKind.TYPE_PARAMETER)


def get_package(model: ForeignModel, elem: ForeignElement) -> ForeignElement:
	"""
	Return the package enclosing `elem` (or `elem` itself if it is a package).

	The enclosing-scope chain of a well-formed model is finite and rooted at a
	package. A chain that runs out (`None`) or loops back on itself is a host
	contract violation and raises `ValueError` instead of walking forever.

	Hosts may hand out a fresh node object per query, so visited nodes are
	kept alive and compared by identity or equality, never by `id()`.
	"""
	visited: list[ForeignElement] = []
	current = elem
	while True:
		if current is None:
			raise ValueError(f"element {elem!r} is not enclosed by a package")
		pkg = as_package_element(model, current)
		if pkg is not None:
			return pkg
		if current in visited:
			raise ValueError(f"enclosing-element chain of {elem!r} is cyclic")
		visited.append(current)
		current = model.enclosing_element(current)


__all__ = [
	"type_kind",
	"element_kind",
	"as_declared_type",
	"as_type_variable",
	"as_primitive_type",
	"as_array_type",
	"as_boxed_type",
	"as_package_element",
	"as_type_element",
	"as_executable_element",
	"as_type_parameter_element",
	"get_package",
]
