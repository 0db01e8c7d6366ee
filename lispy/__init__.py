# Lispy: a small Lisp with S-expressions and Q-expressions.
#
# Runtime data is a tree of Value objects (lispy.types.value). Every node owns
# its children exclusively; the Environment only ever hands out deep clones,
# so no two live trees share a node.
#
# Layering, leaves first:
# - lispy.types:       Value variants and the Environment
# - lispy.builtin:     operation ids, registry and the builtin library
# - lispy.evaluation:  evaluate(value, env)
# - lispy.reader:      text -> parse tree -> Value
# - lispy.printer:     Value -> text
# - lispy.interpreter / lispy.repl: outer layers

__version__ = "0.0.0.0.7"
