# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from sumderive.core.type_name import (
	ArrayTypeName,
	ClassName,
	ParameterizedTypeName,
	PrimitiveTypeName,
	TypeVariableName,
	class_name_of,
	type_name_of,
)
from sumderive.test_support import VOID, InMemoryModel, OtherTypeNode


def test_best_guess_splits_package_and_nested_names():
	name = ClassName.best_guess("java.util.Map.Entry")
	assert name.package == "java.util"
	assert name.simple_names == ("Map", "Entry")
	assert name.simple_name == "Entry"
	assert str(name) == "java.util.Map.Entry"


def test_best_guess_unnamed_package_and_lowercase_names():
	assert ClassName.best_guess("Foo") == ClassName("", ("Foo",))
	assert ClassName.best_guess("demo.thing") == ClassName("demo", ("thing",))
	with pytest.raises(ValueError):
		ClassName.best_guess("demo..Foo")


def test_class_name_navigation():
	entry = ClassName.get("java.util", "Map", "Entry")
	assert entry.enclosing_class_name() == ClassName.get("java.util", "Map")
	assert ClassName.get("java.util", "Map").enclosing_class_name() is None
	assert entry.peer_class("Node") == ClassName.get("java.util", "Map", "Node")
	assert ClassName.get("demo", "Option").nested_class("Some").canonical_name == "demo.Option.Some"


def test_class_name_requires_simple_name():
	with pytest.raises(ValueError):
		ClassName("demo", ())


def test_parameterized_type_name_validation():
	raw = ClassName.get("demo", "Box")
	with pytest.raises(ValueError, match="no type arguments"):
		ParameterizedTypeName(raw, ())
	with pytest.raises(ValueError, match="primitive"):
		ParameterizedTypeName(raw, (PrimitiveTypeName("int"),))


def test_rendering():
	raw = ClassName.get("demo", "Pair")
	pair = ParameterizedTypeName(raw, [TypeVariableName("A"), ArrayTypeName(PrimitiveTypeName("int"))])
	assert str(pair) == "demo.Pair<A, int[]>"
	assert pair.type_arguments == (TypeVariableName("A"), ArrayTypeName(PrimitiveTypeName("int")))


def test_type_name_of_nested_generic_class():
	model = InMemoryModel()
	pkg = model.package("demo")
	outer = model.class_(pkg, "Outer")
	inner = model.class_(outer, "Inner", type_params=["K", "V"])
	k = model.type_var(inner, "K")
	ints = model.array(model.primitive("int"))

	assert class_name_of(model, inner) == ClassName("demo", ("Outer", "Inner"))
	assert str(type_name_of(model, model.declared(inner, k, ints))) == "demo.Outer.Inner<K, int[]>"
	assert type_name_of(model, model.declared(outer)) == ClassName("demo", ("Outer",))


def test_type_name_of_simple_kinds():
	model = InMemoryModel()
	assert type_name_of(model, model.primitive("long")) == PrimitiveTypeName("long")
	assert type_name_of(model, VOID) == PrimitiveTypeName("void")


def test_type_name_of_unnameable_kind_raises():
	model = InMemoryModel()
	with pytest.raises(TypeError, match="WILDCARD"):
		type_name_of(model, OtherTypeNode("WILDCARD"))


def test_class_name_of_requires_type_element():
	model = InMemoryModel()
	pkg = model.package("demo")
	method = model.method(model.class_(pkg, "Box"), "get")
	with pytest.raises(TypeError):
		class_name_of(model, method)
