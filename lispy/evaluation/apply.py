"""Application of builtin operations.

The evaluator hands a Builtin and its already-evaluated argument list to
`apply`, which looks up the operation's implementation and invokes it.
Ownership of `args` passes to the operation.
"""

from lispy.builtin.env_builtin import BUILTINS
from lispy.errors import ErrorKind
from lispy.types.environment import Environment
from lispy.types.value import Builtin, Error, SExpr, Value


def apply(fn: Builtin, args: SExpr, env: Environment) -> Value:
    impl = BUILTINS.get(fn.op)
    if impl is None:
        return Error(f"Unknown function {fn.op.name}!", ErrorKind.BAD_FUNCTION)
    return impl(env, args)
