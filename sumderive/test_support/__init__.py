# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
In-memory foreign model for tests and examples.

`InMemoryModel` implements the `ForeignModel` protocol over small Python
objects so tests can build packages, generic classes, methods and types
without a real host compiler:

	model = InMemoryModel()
	pkg = model.package("demo")
	option = model.class_(pkg, "Option", type_params=["A"])
	a = model.type_var(option, "A")
	model.declared(option, model.boxed_type(model.primitive("int")))

Elements compare by identity (two type parameters named `T` on different
owners are different), types compare structurally over those elements, which
is the identity notion `is_same_type` reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence, Tuple

# Primitive keyword -> simple name of its box class in `java.lang`.
BOXES: Dict[str, str] = {
	"boolean": "Boolean",
	"byte": "Byte",
	"short": "Short",
	"int": "Integer",
	"long": "Long",
	"char": "Character",
	"float": "Float",
	"double": "Double",
}


@dataclass(eq=False)
class PackageElem:
	name: str
	enclosed: List[Any] = field(default_factory=list, repr=False)

	@property
	def tag(self) -> str:
		return "PACKAGE"


@dataclass(eq=False)
class ClassElem:
	name: str
	enclosing: Any = field(repr=False)
	kind: str = "CLASS"
	modifiers: frozenset[str] = frozenset()
	type_parameters: List["TypeParamElem"] = field(default_factory=list)
	enclosed: List[Any] = field(default_factory=list, repr=False)

	@property
	def tag(self) -> str:
		return self.kind


@dataclass(eq=False)
class MethodElem:
	name: str
	enclosing: Any = field(repr=False)
	return_type: Any
	kind: str = "METHOD"
	modifiers: frozenset[str] = frozenset()
	type_parameters: List["TypeParamElem"] = field(default_factory=list)
	parameters: List["VariableElem"] = field(default_factory=list)

	@property
	def tag(self) -> str:
		return self.kind


@dataclass(eq=False)
class TypeParamElem:
	name: str
	enclosing: Any = field(repr=False)

	@property
	def tag(self) -> str:
		return "TYPE_PARAMETER"


@dataclass(eq=False)
class VariableElem:
	name: str
	enclosing: Any = field(repr=False)
	type: Any
	kind: str = "PARAMETER"

	@property
	def tag(self) -> str:
		return self.kind


@dataclass(eq=False)
class OtherElem:
	"""Element of a variant the core does not know (module, annotation value, ...)."""

	name: str
	enclosing: Any = field(repr=False)
	tag: str = "MODULE"


@dataclass(frozen=True)
class DeclaredTypeNode:
	element: ClassElem
	args: Tuple[Any, ...] = ()

	@property
	def tag(self) -> str:
		return "DECLARED"


@dataclass(frozen=True)
class TypeVarNode:
	element: TypeParamElem

	@property
	def tag(self) -> str:
		return "TYPEVAR"


@dataclass(frozen=True)
class PrimitiveNode:
	keyword: str

	@property
	def tag(self) -> str:
		return self.keyword.upper()


@dataclass(frozen=True)
class ArrayNode:
	component: Any

	@property
	def tag(self) -> str:
		return "ARRAY"


@dataclass(frozen=True)
class OtherTypeNode:
	"""Type of a variant the core does not name (wildcard, executable, error, ...)."""

	tag: str


VOID = OtherTypeNode("VOID")


class InMemoryModel:
	"""Reference `ForeignModel` plus builders for the nodes it understands."""

	def __init__(self) -> None:
		self._packages: Dict[str, PackageElem] = {}
		self._boxes: Dict[str, ClassElem] = {}

	# --- builders -----------------------------------------------------------

	def package(self, name: str) -> PackageElem:
		"""Return the package `name`, creating it once."""
		if name not in self._packages:
			self._packages[name] = PackageElem(name)
		return self._packages[name]

	def class_(
		self,
		enclosing: Any,
		name: str,
		*,
		type_params: Iterable[str] = (),
		modifiers: Iterable[str] = (),
		kind: str = "CLASS",
	) -> ClassElem:
		cls = ClassElem(name=name, enclosing=enclosing, kind=kind, modifiers=frozenset(modifiers))
		cls.type_parameters = [TypeParamElem(tp, cls) for tp in type_params]
		enclosing.enclosed.append(cls)
		return cls

	def method(
		self,
		owner: ClassElem,
		name: str,
		*,
		return_type: Any = VOID,
		type_params: Iterable[str] = (),
		modifiers: Iterable[str] = (),
		kind: str = "METHOD",
	) -> MethodElem:
		"""
		Declare a method on `owner`.

		Parameters and a return type mentioning the method's own type variables
		can be attached afterwards (`add_parameter`, `method.return_type = ...`).
		"""
		m = MethodElem(name=name, enclosing=owner, return_type=return_type, kind=kind, modifiers=frozenset(modifiers))
		m.type_parameters = [TypeParamElem(tp, m) for tp in type_params]
		owner.enclosed.append(m)
		return m

	def add_parameter(self, method: MethodElem, name: str, ty: Any) -> VariableElem:
		param = VariableElem(name=name, enclosing=method, type=ty)
		method.parameters.append(param)
		return param

	def add_field(self, owner: ClassElem, name: str, ty: Any) -> VariableElem:
		fld = VariableElem(name=name, enclosing=owner, type=ty, kind="FIELD")
		owner.enclosed.append(fld)
		return fld

	def type_var(self, owner: Any, name: str) -> TypeVarNode:
		"""Return the type variable `name` declared by `owner`."""
		for param in owner.type_parameters:
			if param.name == name:
				return TypeVarNode(param)
		raise KeyError(f"{owner.name} declares no type parameter {name}")

	def declared(self, cls: ClassElem, *args: Any) -> DeclaredTypeNode:
		return DeclaredTypeNode(cls, tuple(args))

	def primitive(self, keyword: str) -> PrimitiveNode:
		return PrimitiveNode(keyword)

	def array(self, component: Any) -> ArrayNode:
		return ArrayNode(component)

	# --- ForeignModel -------------------------------------------------------

	def type_tag(self, ty: Any) -> object:
		return getattr(ty, "tag", None)

	def element_tag(self, elem: Any) -> object:
		return getattr(elem, "tag", None)

	def enclosing_element(self, elem: Any) -> Any:
		return getattr(elem, "enclosing", None)

	def is_same_type(self, a: Any, b: Any) -> bool:
		return a == b

	def boxed_type(self, primitive: Any) -> DeclaredTypeNode:
		keyword = primitive.keyword
		if keyword not in self._boxes:
			self._boxes[keyword] = self.class_(self.package("java.lang"), BOXES[keyword], modifiers=("public", "final"))
		return DeclaredTypeNode(self._boxes[keyword])

	def element_of(self, ty: Any) -> Any:
		return ty.element

	def type_arguments(self, ty: Any) -> Sequence[Any]:
		return ty.args

	def component_type(self, ty: Any) -> Any:
		return ty.component

	def primitive_name(self, ty: Any) -> str:
		return ty.keyword

	def type_of(self, elem: Any) -> Any:
		if isinstance(elem, ClassElem):
			return DeclaredTypeNode(elem, tuple(TypeVarNode(p) for p in elem.type_parameters))
		if isinstance(elem, TypeParamElem):
			return TypeVarNode(elem)
		if isinstance(elem, VariableElem):
			return elem.type
		if isinstance(elem, MethodElem):
			return OtherTypeNode("EXECUTABLE")
		return OtherTypeNode("NONE")

	def simple_name(self, elem: Any) -> str:
		if isinstance(elem, PackageElem):
			return elem.name.rsplit(".", 1)[-1]
		return elem.name

	def qualified_name(self, elem: Any) -> str:
		if isinstance(elem, PackageElem):
			return elem.name
		if isinstance(elem, ClassElem):
			outer = self.qualified_name(elem.enclosing)
			return f"{outer}.{elem.name}" if outer else elem.name
		return elem.name

	def type_parameters(self, elem: Any) -> Sequence[Any]:
		return tuple(getattr(elem, "type_parameters", ()))

	def enclosed_elements(self, elem: Any) -> Sequence[Any]:
		return tuple(getattr(elem, "enclosed", ()))

	def modifiers(self, elem: Any) -> frozenset[str]:
		return frozenset(getattr(elem, "modifiers", ()))

	def return_type(self, executable: Any) -> Any:
		return executable.return_type

	def parameters(self, executable: Any) -> Sequence[Any]:
		return tuple(executable.parameters)


__all__ = [
	"BOXES",
	"PackageElem",
	"ClassElem",
	"MethodElem",
	"TypeParamElem",
	"VariableElem",
	"OtherElem",
	"DeclaredTypeNode",
	"TypeVarNode",
	"PrimitiveNode",
	"ArrayNode",
	"OtherTypeNode",
	"VOID",
	"InMemoryModel",
]
