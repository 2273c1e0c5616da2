"""Builds a sample program in the symbol table and prints it."""

from __future__ import annotations

import sys

from kplc.debug import format_object
from kplc.symtab import (
    ParamKind,
    SymbolTable,
    make_array_type,
    make_char_constant,
    make_char_type,
    make_int_constant,
    make_int_type,
)


def build_demo_program() -> SymbolTable:
    """Return a symbol table holding the sample program PRG."""
    table = SymbolTable()

    program = table.create_program("PRG")
    table.enter_block(program.scope)

    obj = table.create_constant("c1")
    obj.value = make_int_constant(10)
    table.declare_object(obj)

    obj = table.create_constant("c2")
    obj.value = make_char_constant("a")
    table.declare_object(obj)

    obj = table.create_type("t1")
    obj.actual_type = make_array_type(10, make_int_type())
    table.declare_object(obj)

    obj = table.create_variable("v1")
    obj.type = make_int_type()
    table.declare_object(obj)

    obj = table.create_variable("v2")
    obj.type = make_array_type(10, make_array_type(10, make_int_type()))
    table.declare_object(obj)

    func = table.create_function("f")
    func.return_type = make_int_type()
    table.declare_object(func)

    table.enter_block(func.scope)
    param = table.create_parameter("p1", ParamKind.VALUE, table.current_scope.owner)
    param.type = make_int_type()
    table.declare_object(param)
    param = table.create_parameter("p2", ParamKind.REFERENCE, table.current_scope.owner)
    param.type = make_char_type()
    table.declare_object(param)
    table.exit_block()

    proc = table.create_procedure("p")
    table.declare_object(proc)

    table.enter_block(proc.scope)
    param = table.create_parameter("v1", ParamKind.VALUE, table.current_scope.owner)
    param.type = make_int_type()
    table.declare_object(param)

    obj = table.create_constant("c1")
    obj.value = make_char_constant("a")
    table.declare_object(obj)

    obj = table.create_constant("c3")
    obj.value = make_int_constant(10)
    table.declare_object(obj)

    obj = table.create_type("t1")
    obj.actual_type = make_int_type()
    table.declare_object(obj)

    obj = table.create_type("t2")
    obj.actual_type = make_array_type(10, make_int_type())
    table.declare_object(obj)

    obj = table.create_variable("v2")
    obj.type = make_array_type(10, make_int_type())
    table.declare_object(obj)

    obj = table.create_variable("v3")
    obj.type = make_char_type()
    table.declare_object(obj)
    table.exit_block()

    table.exit_block()
    return table


def main(argv: list[str] | None = None) -> int:
    """Print the sample program's symbol table."""
    table = build_demo_program()
    sys.stdout.write(format_object(table.program, 0))
    return 0


if __name__ == "__main__":
    sys.exit(main())