# lispc: a small Lisp-like expression evaluator.
#
# Values are instances of the classes in lispc.types.value. Every node is
# exclusively owned by its parent container; storing a value anywhere else
# (the Environment, a `def` binding) takes a deep copy.
#
# Naming guidance:
# - AstNode: the syntax tree produced by lispc.reader.grammar (code as text structure).
# - Value:   the tagged value tree produced by the reader and consumed by the evaluator.

__version__ = "0.0.1"
