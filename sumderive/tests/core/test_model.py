# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from sumderive.core.model import (
	DeriveContext,
	TypeConstructor,
	check_distinct_type_variables,
	get_class_name,
	type_constructor_of,
)
from sumderive.core.type_name import ClassName
from sumderive.test_support import InMemoryModel


def test_type_constructor_of_generic_class():
	model = InMemoryModel()
	pkg = model.package("demo")
	either = model.class_(pkg, "Either", type_params=["L", "R"])
	left = model.type_var(either, "L")
	right = model.type_var(either, "R")

	ctor = type_constructor_of(model, either)

	assert ctor is not None
	assert ctor.type_element is either
	assert ctor.declared_type == model.declared(either, left, right)
	assert ctor.type_variables == (left, right)


def test_type_constructor_of_non_type_element_is_absent():
	model = InMemoryModel()
	pkg = model.package("demo")
	cls = model.class_(pkg, "Box")
	method = model.method(cls, "get")

	assert type_constructor_of(model, pkg) is None
	assert type_constructor_of(model, method) is None


def test_type_constructor_normalizes_variables_to_tuple():
	model = InMemoryModel()
	pkg = model.package("demo")
	box = model.class_(pkg, "Box", type_params=["A"])
	a = model.type_var(box, "A")

	ctor = TypeConstructor(box, model.declared(box, a), [a])
	assert ctor.type_variables == (a,)


def test_check_distinct_type_variables():
	model = InMemoryModel()
	pkg = model.package("demo")
	outer = model.class_(pkg, "Outer", type_params=["T"])
	inner = model.class_(outer, "Inner", type_params=["T"])
	t_outer = model.type_var(outer, "T")
	t_inner = model.type_var(inner, "T")

	# Same display name, different variables.
	check_distinct_type_variables(model, [t_outer, t_inner])
	with pytest.raises(ValueError, match="duplicate type variable"):
		check_distinct_type_variables(model, [t_outer, t_inner, t_outer])


def test_get_class_name_nests_in_target_class():
	ctx = DeriveContext(target_package="demo.data", target_class_name="Options")
	name = get_class_name(ctx, "Some")
	assert name == ClassName("demo.data", ("Options", "Some"))
	assert str(name) == "demo.data.Options.Some"
