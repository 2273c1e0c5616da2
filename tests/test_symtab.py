import pytest

from kplc.symtab import (
    ConstantObject,
    FunctionObject,
    ObjectKind,
    ParamKind,
    ParameterObject,
    ProcedureObject,
    SymbolTable,
    TypeClass,
    compare_type,
    duplicate_constant_value,
    duplicate_type,
    find_object,
    make_array_type,
    make_char_constant,
    make_char_type,
    make_int_constant,
    make_int_type,
)


@pytest.fixture
def table():
    symtab = SymbolTable()
    program = symtab.create_program("PRG")
    symtab.enter_block(program.scope)
    return symtab


def test_globals_are_predeclared():
    symtab = SymbolTable()
    names = [obj.name for obj in symtab.global_objects]
    assert names == ["READC", "READI", "WRITEI", "WRITEC", "WRITELN"]
    readc = find_object(symtab.global_objects, "READC")
    assert readc.return_type.type_class is TypeClass.CHAR
    writei = find_object(symtab.global_objects, "WRITEI")
    assert [p.name for p in writei.params] == ["i"]
    assert writei.params[0].type.type_class is TypeClass.INT
    assert writei.params[0].function is writei
    assert find_object(symtab.global_objects, "WRITELN").params == []


def test_create_program_records_program(table):
    assert table.program.name == "PRG"
    assert table.program.kind is ObjectKind.PROGRAM
    assert table.current_scope is table.program.scope
    assert table.program.scope.owner is table.program
    assert table.program.scope.outer is None


def test_declare_adds_in_order(table):
    c1 = table.create_constant("c1")
    c1.value = make_int_constant(10)
    table.declare_object(c1)
    v1 = table.create_variable("v1")
    v1.type = make_int_type()
    table.declare_object(v1)
    assert [o.name for o in table.program.scope.objects] == ["c1", "v1"]
    assert v1.scope is table.program.scope
    assert find_object(table.program.scope.objects, "c1") is c1
    assert find_object(table.program.scope.objects, "missing") is None


def test_function_scope_and_parameters(table):
    func = table.create_function("f")
    func.return_type = make_int_type()
    table.declare_object(func)
    assert func.scope.outer is table.program.scope
    assert func.scope.owner is func

    table.enter_block(func.scope)
    p1 = table.create_parameter("p1", ParamKind.VALUE, table.current_scope.owner)
    p1.type = make_int_type()
    table.declare_object(p1)
    p2 = table.create_parameter("p2", ParamKind.REFERENCE, table.current_scope.owner)
    p2.type = make_char_type()
    table.declare_object(p2)
    table.exit_block()

    assert func.params == [p1, p2]
    assert func.scope.objects == [p1, p2]
    assert p2.param_kind is ParamKind.REFERENCE
    assert p1.function is func
    assert table.current_scope is table.program.scope


def test_parameter_in_program_scope_not_added_to_params(table):
    param = table.create_parameter("x", ParamKind.VALUE, table.program)
    table.declare_object(param)
    assert table.program.scope.objects == [param]


def test_procedure_has_no_return_type(table):
    proc = table.create_procedure("p")
    assert isinstance(proc, ProcedureObject)
    assert proc.kind is ObjectKind.PROCEDURE
    assert not hasattr(proc, "return_type")


def test_exit_block_past_outermost_raises():
    symtab = SymbolTable()
    with pytest.raises(RuntimeError):
        symtab.exit_block()


def test_declare_without_scope_raises():
    symtab = SymbolTable()
    with pytest.raises(RuntimeError):
        symtab.declare_object(ConstantObject("c"))


def test_compare_type():
    assert compare_type(make_int_type(), make_int_type())
    assert not compare_type(make_int_type(), make_char_type())
    a = make_array_type(10, make_int_type())
    assert compare_type(a, make_array_type(10, make_int_type()))
    assert not compare_type(a, make_array_type(5, make_int_type()))
    assert not compare_type(a, make_array_type(10, make_char_type()))
    assert not compare_type(a, make_int_type())


def test_duplicate_type_is_deep():
    original = make_array_type(10, make_array_type(10, make_int_type()))
    copy = duplicate_type(original)
    assert compare_type(original, copy)
    assert copy.element_type is not original.element_type
    copy.element_type.array_size = 3
    assert original.element_type.array_size == 10


def test_constants_and_duplicates():
    c = make_char_constant("a")
    assert c.type is TypeClass.CHAR and c.value == "a"
    i = make_int_constant(10)
    dup = duplicate_constant_value(i)
    assert dup == i and dup is not i


@pytest.mark.parametrize("bad", ["", "ab", 5])
def test_make_char_constant_rejects_non_char(bad):
    with pytest.raises(ValueError):
        make_char_constant(bad)


def test_object_kinds():
    assert FunctionObject("f").kind is ObjectKind.FUNCTION
    assert ParameterObject("p").kind is ObjectKind.PARAMETER
    assert ParameterObject("p").param_kind is ParamKind.VALUE