"""Symbol table: types, constant values, declared objects and nested scopes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import ClassVar, Union


class TypeClass(Enum):
    """Class of a type."""

    INT = auto()
    CHAR = auto()
    ARRAY = auto()


class ObjectKind(Enum):
    """Kind of a declared object."""

    CONSTANT = auto()
    VARIABLE = auto()
    TYPE = auto()
    FUNCTION = auto()
    PROCEDURE = auto()
    PARAMETER = auto()
    PROGRAM = auto()


class ParamKind(Enum):
    """How a parameter is passed."""

    VALUE = auto()
    REFERENCE = auto()


@dataclass
class Type:
    """A type; ``array_size`` and ``element_type`` matter only for arrays."""

    type_class: TypeClass
    array_size: int = 0
    element_type: Type | None = None


@dataclass
class ConstantValue:
    """A constant: an int for INT constants, a one-character str for CHAR."""

    type: TypeClass
    value: int | str


def make_int_type() -> Type:
    """Return a new integer type."""
    return Type(TypeClass.INT)


def make_char_type() -> Type:
    """Return a new char type."""
    return Type(TypeClass.CHAR)


def make_array_type(array_size: int, element_type: Type) -> Type:
    """Return a new array type of ``array_size`` elements."""
    return Type(TypeClass.ARRAY, array_size, element_type)


def duplicate_type(type_: Type) -> Type:
    """Return a deep copy of ``type_``."""
    if type_.type_class is TypeClass.ARRAY:
        return Type(TypeClass.ARRAY, type_.array_size, duplicate_type(type_.element_type))
    return Type(type_.type_class)


def compare_type(type1: Type, type2: Type) -> bool:
    """Return True if the two types are structurally the same."""
    if type1.type_class is not type2.type_class:
        return False
    if type1.type_class is TypeClass.ARRAY:
        return type1.array_size == type2.array_size and compare_type(
            type1.element_type, type2.element_type
        )
    return True


def make_int_constant(value: int) -> ConstantValue:
    """Return an integer constant."""
    return ConstantValue(TypeClass.INT, value)


def make_char_constant(ch: str) -> ConstantValue:
    """Return a char constant; ``ch`` must be a single character."""
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ConstantValue(TypeClass.CHAR, ch)


def duplicate_constant_value(value: ConstantValue) -> ConstantValue:
    """Return a copy of a constant value."""
    return ConstantValue(value.type, value.value)


@dataclass(eq=False)
class Scope:
    """Objects declared in one block, with the block's owner and enclosing scope."""

    owner: SymbolObject | None = field(default=None, repr=False)
    outer: Scope | None = field(default=None, repr=False)
    objects: list[SymbolObject] = field(default_factory=list)


@dataclass(eq=False)
class ConstantObject:
    name: str
    value: ConstantValue | None = None
    kind: ClassVar[ObjectKind] = ObjectKind.CONSTANT


@dataclass(eq=False)
class TypeObject:
    name: str
    actual_type: Type | None = None
    kind: ClassVar[ObjectKind] = ObjectKind.TYPE


@dataclass(eq=False)
class VariableObject:
    name: str
    type: Type | None = None
    scope: Scope | None = field(default=None, repr=False)
    kind: ClassVar[ObjectKind] = ObjectKind.VARIABLE


@dataclass(eq=False)
class FunctionObject:
    name: str
    return_type: Type | None = None
    params: list[ParameterObject] = field(default_factory=list)
    outer: InitVar[Scope | None] = None
    kind: ClassVar[ObjectKind] = ObjectKind.FUNCTION

    def __post_init__(self, outer: Scope | None) -> None:
        self.scope = Scope(owner=self, outer=outer)


@dataclass(eq=False)
class ProcedureObject:
    name: str
    params: list[ParameterObject] = field(default_factory=list)
    outer: InitVar[Scope | None] = None
    kind: ClassVar[ObjectKind] = ObjectKind.PROCEDURE

    def __post_init__(self, outer: Scope | None) -> None:
        self.scope = Scope(owner=self, outer=outer)


@dataclass(eq=False)
class ParameterObject:
    name: str
    param_kind: ParamKind = ParamKind.VALUE
    type: Type | None = None
    function: SymbolObject | None = field(default=None, repr=False)
    kind: ClassVar[ObjectKind] = ObjectKind.PARAMETER


@dataclass(eq=False)
class ProgramObject:
    name: str
    kind: ClassVar[ObjectKind] = ObjectKind.PROGRAM

    def __post_init__(self) -> None:
        self.scope = Scope(owner=self, outer=None)


SymbolObject = Union[
    ConstantObject,
    TypeObject,
    VariableObject,
    FunctionObject,
    ProcedureObject,
    ParameterObject,
    ProgramObject,
]


def find_object(objects: Iterable[SymbolObject], name: str) -> SymbolObject | None:
    """Return the first object called ``name``, or None."""
    return next((obj for obj in objects if obj.name == name), None)


class SymbolTable:
    """The program object, the current scope and the predeclared globals."""

    def __init__(self) -> None:
        self.program: ProgramObject | None = None
        self.current_scope: Scope | None = None
        self.global_objects: list[SymbolObject] = []

        readc = self.create_function("READC")
        readc.return_type = make_char_type()
        self.global_objects.append(readc)

        readi = self.create_function("READI")
        readi.return_type = make_int_type()
        self.global_objects.append(readi)

        for proc_name, param_name, make in (
            ("WRITEI", "i", make_int_type),
            ("WRITEC", "ch", make_char_type),
        ):
            proc = self.create_procedure(proc_name)
            param = self.create_parameter(param_name, ParamKind.VALUE, proc)
            param.type = make()
            proc.params.append(param)
            self.global_objects.append(proc)

        self.global_objects.append(self.create_procedure("WRITELN"))

        self.int_type = make_int_type()
        self.char_type = make_char_type()

    def create_program(self, name: str) -> ProgramObject:
        """Create the program object and record it as this table's program."""
        program = ProgramObject(name)
        self.program = program
        return program

    def create_constant(self, name: str) -> ConstantObject:
        return ConstantObject(name)

    def create_type(self, name: str) -> TypeObject:
        return TypeObject(name)

    def create_variable(self, name: str) -> VariableObject:
        """Create a variable belonging to the current scope."""
        return VariableObject(name, scope=self.current_scope)

    def create_function(self, name: str) -> FunctionObject:
        """Create a function whose scope is nested in the current scope."""
        return FunctionObject(name, outer=self.current_scope)

    def create_procedure(self, name: str) -> ProcedureObject:
        """Create a procedure whose scope is nested in the current scope."""
        return ProcedureObject(name, outer=self.current_scope)

    def create_parameter(
        self, name: str, kind: ParamKind, owner: SymbolObject | None
    ) -> ParameterObject:
        return ParameterObject(name, param_kind=kind, function=owner)

    def enter_block(self, scope: Scope) -> None:
        """Make ``scope`` the current scope."""
        self.current_scope = scope

    def exit_block(self) -> None:
        """Return to the scope enclosing the current one."""
        if self.current_scope is None:
            raise RuntimeError("no block to exit")
        self.current_scope = self.current_scope.outer

    def declare_object(self, obj: SymbolObject) -> None:
        """Add ``obj`` to the current scope; parameters also join the owner's list."""
        scope = self.current_scope
        if scope is None:
            raise RuntimeError("no current scope to declare in")
        if isinstance(obj, ParameterObject) and isinstance(
            scope.owner, (FunctionObject, ProcedureObject)
        ):
            scope.owner.params.append(obj)
        scope.objects.append(obj)