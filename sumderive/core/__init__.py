"""
sumderive.core: shared derivation core used by the pipeline and emitters.

Modules:
  - foreign: ForeignModel protocol and TypeKind/ElementKind classification
  - classify: variant narrowing over foreign nodes
  - diagnostics: DeriveMessage payload
  - result: DeriveResult and fail-fast traversal
  - combinators: only_one / traverse_optional / zip_pairs helpers
  - type_name: emitted type references and foreign-type conversion
  - type_name_parser: textual type-reference notation (lark grammar)
  - model: TypeConstructor/DataArgument/TypeRestriction/DeriveContext
  - refine: type-variable refinement
  - naming: identifier/argument-list string helpers
  - methods: method discovery and override signatures
"""

__all__ = [
    "foreign",
    "classify",
    "diagnostics",
    "result",
    "combinators",
    "type_name",
    "type_name_parser",
    "model",
    "refine",
    "naming",
    "methods",
]
