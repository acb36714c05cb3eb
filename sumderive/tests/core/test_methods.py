# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from sumderive.core.methods import (
	MethodSignature,
	ParameterSpec,
	get_abstract_methods,
	get_methods,
	override_method,
)
from sumderive.core.type_name import ClassName, ParameterizedTypeName, PrimitiveTypeName, TypeVariableName
from sumderive.test_support import InMemoryModel


def _expr_model():
	model = InMemoryModel()
	pkg = model.package("demo")
	cases = model.class_(pkg, "Cases", type_params=["T", "R"], kind="INTERFACE")
	expr = model.class_(pkg, "Expr", type_params=["T"], modifiers=("public", "abstract"))
	match = model.method(expr, "match", type_params=["R"], modifiers=("public", "abstract"))
	r = model.type_var(match, "R")
	match.return_type = r
	model.add_parameter(match, "cases", model.declared(cases, model.type_var(expr, "T"), r))
	string = model.declared(model.class_(model.package("java.lang"), "String"))
	to_string = model.method(expr, "toString", return_type=string, modifiers=("public",))
	model.add_field(expr, "hash", model.primitive("int"))
	return model, expr, match, to_string


def test_get_methods_skips_non_executables():
	model, expr, match, to_string = _expr_model()
	members = model.enclosed_elements(expr)

	assert get_methods(model, members) == [match, to_string]
	assert get_abstract_methods(model, members) == [match]


def test_override_method_signature():
	model, _expr, match, _to_string = _expr_model()

	sig = override_method(model, match)

	assert sig.name == "match"
	assert sig.modifiers == ("public",)
	assert sig.annotations == ("Override",)
	assert sig.type_variables == (TypeVariableName("R"),)
	assert sig.return_type == TypeVariableName("R")
	assert sig.parameters == (
		ParameterSpec(
			"cases",
			ParameterizedTypeName(ClassName("demo", ("Cases",)), (TypeVariableName("T"), TypeVariableName("R"))),
		),
	)
	assert str(sig) == "@Override public <R> R match(demo.Cases<T, R> cases)"


def test_override_void_method_orders_modifiers():
	model = InMemoryModel()
	task = model.class_(model.package("demo"), "Task")
	run = model.method(task, "run", modifiers=("final", "abstract", "protected", "synchronized"))

	sig = override_method(model, run)

	assert sig.return_type == PrimitiveTypeName("void")
	assert sig.modifiers == ("protected", "final", "synchronized")
	assert str(sig) == "@Override protected final synchronized void run()"


def test_method_signature_rendering_without_annotations():
	sig = MethodSignature(
		name="of",
		return_type=ClassName.get("demo", "Box"),
		modifiers=("public", "static"),
		parameters=(ParameterSpec("value", PrimitiveTypeName("int")),),
	)
	assert str(sig) == "public static demo.Box of(int value)"
