# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Specialize a type constructor's variables under asserted equalities.

Given `Expr<T>` and a restriction `T = Integer` (for instance inside the
`IntConst` case of a GADT-style sum type), generated accessors can expose
`Expr<Integer>` instead of `Expr<T>`. The substitution happens here, once,
when the signature is built.

Variables are matched with the foreign `is_same_type`, never by name: two
distinct variables that both print as `T` (shadowing) stay distinct. When
several restrictions target the same variable the first one wins.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from sumderive.core.classify import as_boxed_type
from sumderive.core.foreign import ForeignModel, ForeignType
from sumderive.core.model import TypeConstructor, TypeRestriction
from sumderive.core.type_name import ClassName, ParameterizedTypeName, TypeName, class_name_of, type_name_of


def refined_type_arguments(
	model: ForeignModel,
	ctor: TypeConstructor,
	restrictions: Sequence[TypeRestriction],
) -> List[ForeignType]:
	"""Return `ctor`'s type arguments with restricted variables substituted."""
	out: List[ForeignType] = []
	for tv in ctor.type_variables:
		match = next(
			(tr for tr in restrictions if model.is_same_type(tr.restricted_type_variable, tv)),
			None,
		)
		out.append(match.refinement_type if match is not None else tv)
	return out


def refine(model: ForeignModel, ctor: TypeConstructor, restrictions: Sequence[TypeRestriction]) -> TypeName:
	"""
	Type name of `ctor` with its variables refined by `restrictions`.

	A constructor without type variables yields its bare declared type name.
	Primitive refinements are boxed, since type arguments must be reference
	types.
	"""
	if not ctor.type_variables:
		return type_name_of(model, ctor.declared_type)
	args = [type_name_of(model, as_boxed_type(model, ty)) for ty in refined_type_arguments(model, ctor, restrictions)]
	return ParameterizedTypeName(class_name_of(model, ctor.type_element), tuple(args))


def parameterized(class_name: ClassName, type_arguments: Iterable[TypeName]) -> TypeName:
	"""`class_name` applied to already-computed arguments (bare name if none)."""
	args = tuple(type_arguments)
	if not args:
		return class_name
	return ParameterizedTypeName(class_name, args)


__all__ = ["refined_type_arguments", "refine", "parameterized"]
