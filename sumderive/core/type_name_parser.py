# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parse the textual type-reference notation into `TypeName` values.

Handy wherever a signature is easier to spell than to build:

	parse_type_name("demo.Either<A, java.util.List<B>>", type_variables={"A", "B"})

The grammar lives next to this module in `type_name.lark`. Bare names listed
in `type_variables` become `TypeVariableName`s, bare primitive keywords become
`PrimitiveTypeName`s, and every other name is split into package and class
parts with `ClassName.best_guess`.
"""

from __future__ import annotations

from pathlib import Path
from typing import AbstractSet, List

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from sumderive.core.type_name import (
	ArrayTypeName,
	ClassName,
	ParameterizedTypeName,
	PrimitiveTypeName,
	TypeName,
	TypeVariableName,
)

_GRAMMAR_PATH = Path(__file__).with_name("type_name.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

DEFAULT_PRIMITIVES: frozenset[str] = frozenset(
	{"boolean", "byte", "short", "int", "long", "char", "float", "double", "void"}
)

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	start="type_ref",
	propagate_positions=True,
	maybe_placeholders=False,
)


class TypeNameParseError(ValueError):
	"""Raised for malformed type-reference text; `column` is 1-based when known."""

	def __init__(self, message: str, *, text: str, column: int | None = None) -> None:
		super().__init__(message)
		self.text = text
		self.column = column


def _name(node: Tree | Token) -> str:
	return str(node.data) if isinstance(node, Tree) else node.type


def _qualified_parts(node: Tree) -> List[str]:
	return [tok.value for tok in node.children if isinstance(tok, Token)]


def _build(node: Tree, type_variables: AbstractSet[str], primitives: AbstractSet[str]) -> TypeName:
	kind = _name(node)
	if kind == "array_type":
		return ArrayTypeName(_build(node.children[0], type_variables, primitives))
	if kind == "generic_type":
		raw = ClassName.best_guess(".".join(_qualified_parts(node.children[0])))
		args = tuple(_build(child, type_variables, primitives) for child in node.children[1:])
		return ParameterizedTypeName(raw, args)
	if kind == "simple_type":
		parts = _qualified_parts(node.children[0])
		if len(parts) == 1 and parts[0] in type_variables:
			return TypeVariableName(parts[0])
		if len(parts) == 1 and parts[0] in primitives:
			return PrimitiveTypeName(parts[0])
		return ClassName.best_guess(".".join(parts))
	raise TypeError(f"unexpected type-name node {kind}")


def parse_type_name(
	text: str,
	*,
	type_variables: AbstractSet[str] = frozenset(),
	primitives: AbstractSet[str] = DEFAULT_PRIMITIVES,
) -> TypeName:
	"""Parse `text` into a `TypeName`, raising `TypeNameParseError` on bad input."""
	try:
		tree = _PARSER.parse(text)
	except UnexpectedInput as exc:
		column = getattr(exc, "column", None)
		if not isinstance(column, int) or column < 1:
			column = None
		raise TypeNameParseError(f"invalid type name {text!r}", text=text, column=column) from exc
	try:
		return _build(tree, type_variables, primitives)
	except ValueError as exc:
		raise TypeNameParseError(f"invalid type name {text!r}: {exc}", text=text) from exc


__all__ = ["DEFAULT_PRIMITIVES", "TypeNameParseError", "parse_type_name"]
