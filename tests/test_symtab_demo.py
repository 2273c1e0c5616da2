from kplc.debug import format_object
from kplc.symtab import (
    FunctionObject,
    ParamKind,
    ProcedureObject,
    TypeClass,
    find_object,
)
from kplc.symtab_demo import build_demo_program, main


def test_program_scope_contents():
    table = build_demo_program()
    assert table.program.name == "PRG"
    names = [obj.name for obj in table.program.scope.objects]
    assert names == ["c1", "c2", "t1", "v1", "v2", "f", "p"]


def test_current_scope_restored():
    table = build_demo_program()
    assert table.current_scope is None


def test_function_parameters():
    table = build_demo_program()
    func = find_object(table.program.scope.objects, "f")
    assert isinstance(func, FunctionObject)
    assert [p.name for p in func.params] == ["p1", "p2"]
    assert [p.param_kind for p in func.params] == [ParamKind.VALUE, ParamKind.REFERENCE]
    assert all(p.function is func for p in func.params)
    assert func.scope.outer is table.program.scope


def test_procedure_scope_shadows_outer_names():
    table = build_demo_program()
    proc = find_object(table.program.scope.objects, "p")
    assert isinstance(proc, ProcedureObject)
    assert [p.name for p in proc.params] == ["v1"]
    inner_c1 = find_object(proc.scope.objects, "c1")
    outer_c1 = find_object(table.program.scope.objects, "c1")
    assert inner_c1.value.type is TypeClass.CHAR
    assert outer_c1.value.type is TypeClass.INT
    assert find_object(proc.scope.objects, "c2") is None


def test_variable_scope_links():
    table = build_demo_program()
    proc = find_object(table.program.scope.objects, "p")
    assert find_object(proc.scope.objects, "v3").scope is proc.scope
    assert find_object(table.program.scope.objects, "v1").scope is table.program.scope


def test_rendering_shape():
    table = build_demo_program()
    lines = format_object(table.program, 0).split("\n")
    assert lines[0] == "Program PRG"
    assert "    Var v2 : Arr(10,Arr(10,Int))" in lines
    assert "        Param VAR p2 : Char" in lines


def test_main_prints_program(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == format_object(build_demo_program().program, 0)