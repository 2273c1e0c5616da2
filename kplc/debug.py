"""Text rendering of types, constants and symbol-table objects."""

from __future__ import annotations

from collections.abc import Iterable

from kplc.symtab import (
    ConstantObject,
    ConstantValue,
    FunctionObject,
    ParameterObject,
    ParamKind,
    ProcedureObject,
    ProgramObject,
    Scope,
    SymbolObject,
    Type,
    TypeClass,
    TypeObject,
    VariableObject,
)

_SCOPE_INDENT = 4


def format_type(type_: Type) -> str:
    """Render a type as 'Int', 'Char' or 'Arr(size,element)'."""
    if type_.type_class is TypeClass.INT:
        return "Int"
    if type_.type_class is TypeClass.CHAR:
        return "Char"
    if type_.element_type is None:
        raise ValueError("array type has no element type")
    return f"Arr({type_.array_size},{format_type(type_.element_type)})"


def format_constant_value(value: ConstantValue) -> str:
    """Render a constant: the number for ints, the quoted character for chars."""
    if value.type is TypeClass.INT:
        return str(value.value)
    if value.type is TypeClass.CHAR:
        return f"'{value.value}'"
    return ""


def _require(part: object, what: str, name: str) -> object:
    if part is None:
        raise ValueError(f"{name} has no {what}")
    return part


def format_object(obj: SymbolObject, indent: int) -> str:
    """Render one object; blocks are followed by their scope, indented further."""
    pad = " " * indent
    inner = indent + _SCOPE_INDENT
    if isinstance(obj, ConstantObject):
        value = _require(obj.value, "value", obj.name)
        return f"{pad}Const {obj.name} = {format_constant_value(value)}"
    if isinstance(obj, TypeObject):
        actual = _require(obj.actual_type, "type", obj.name)
        return f"{pad}Type {obj.name} = {format_type(actual)}"
    if isinstance(obj, VariableObject):
        var_type = _require(obj.type, "type", obj.name)
        return f"{pad}Var {obj.name} : {format_type(var_type)}"
    if isinstance(obj, ParameterObject):
        param_type = _require(obj.type, "type", obj.name)
        label = "Param" if obj.param_kind is ParamKind.VALUE else "Param VAR"
        return f"{pad}{label} {obj.name} : {format_type(param_type)}"
    if isinstance(obj, FunctionObject):
        return_type = _require(obj.return_type, "return type", obj.name)
        header = f"{pad}Function {obj.name} : {format_type(return_type)}\n"
        return header + format_scope(obj.scope, inner)
    if isinstance(obj, ProcedureObject):
        return f"{pad}Procedure {obj.name}\n" + format_scope(obj.scope, inner)
    if isinstance(obj, ProgramObject):
        return f"{pad}Program {obj.name}\n" + format_scope(obj.scope, inner)
    raise TypeError(f"not a symbol-table object: {obj!r}")


def format_object_list(objects: Iterable[SymbolObject], indent: int) -> str:
    """Render each object followed by a newline."""
    return "".join(format_object(obj, indent) + "\n" for obj in objects)


def format_scope(scope: Scope, indent: int) -> str:
    """Render the objects declared in a scope."""
    return format_object_list(scope.objects, indent)