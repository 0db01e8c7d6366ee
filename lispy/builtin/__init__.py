"""Builtin operations.

`ops` holds the operation ids and their canonical names and has no imports of
its own, so the value model can depend on it. The implementations live in
`env_builtin`.
"""
