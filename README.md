# kplc

Building blocks for a compiler front end for KPL, a small Pascal-like
teaching language: a scanner that turns source text into tokens, and a
symbol table with nested scopes. It also ships a word-index utility.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `kplc-scan FILE`

Reads a KPL source file and prints one line per token, in the form
`line-column:TOKEN`:

```
$ kplc-scan example.kpl
1-1:KW_PROGRAM
1-9:TK_IDENT(EXAMPLE)
1-16:SB_SEMICOLON
```

Identifiers and numbers show their text, as in `TK_IDENT(x)` and
`TK_NUMBER(10)`. Character constants show as `TK_CHAR('a')`. Keywords are
matched without regard to case.

If no file is given, it prints `scanner: no input file.`. If the file cannot
be read, it prints `Can't read input file!`. A lexical error, such as an
unterminated comment or an invalid symbol, prints `line-column:message` and
stops the scan. In each of these cases the command exits with a non-zero
status.

### `kplc-symtab-demo`

Builds a sample program `PRG` in the symbol table and prints it:

```
Program PRG
    Const c1 = 10
    Const c2 = 'a'
    Type t1 = Arr(10,Int)
    Var v1 : Int
    Var v2 : Arr(10,Arr(10,Int))
    Function f : Int
        Param p1 : Int
        Param VAR p2 : Char

    Procedure p
        Param v1 : Int
        Const c1 = 'a'
        Const c3 = 10
        Type t1 = Int
        Type t2 = Arr(10,Int)
        Var v2 : Arr(10,Int)
        Var v3 : Char

```

### `kplc-wordindex [STOPWORDS [TEXT]]`

Prints an alphabetical index of the words in a text file. Each line gives the
word, how many times it was counted, and the distinct lines it appears on:

```
apple 3, 1, 4
```

The stop-word file defaults to `stopw.txt` and the text file to
`vanban.txt`, both in the current directory. Words are lower-cased. Words
listed in the stop-word file are skipped, and so are capitalised words that
do not start a sentence, since these are taken to be proper names. A missing
stop-word file means no stop words. If the text file cannot be read, the
command writes an error to standard error and exits with status 1.

## Library use

```python
from kplc.scanner import scan_text, format_token
from kplc.symtab import SymbolTable, make_int_type
from kplc.debug import format_object

for token in scan_text("x := 10;"):
    print(format_token(token))

table = SymbolTable()
program = table.create_program("PRG")
table.enter_block(program.scope)
var = table.create_variable("v1")
var.type = make_int_type()
table.declare_object(var)
table.exit_block()
print(format_object(program, 0))
```

The modules:

- `kplc.charcode`: `char_code(ch)` sorts one character into a `CharCode` class.
- `kplc.token`: `TokenType`, the `Token` dataclass, `check_keyword` and
  `token_to_string`.
- `kplc.reader`: `CharReader`, which reads text or a file character by
  character and tracks the line and column.
- `kplc.scanner`: `Scanner`, which yields tokens from a `CharReader`. Also
  `scan_text` and `format_token`.
- `kplc.errors`: `ErrorCode`, `CompileError` and `MissingTokenError`.
  `str()` of an error gives `line-column:message`.
- `kplc.symtab`: types (`make_int_type`, `make_char_type`,
  `make_array_type`, `duplicate_type`, `compare_type`), constants
  (`make_int_constant`, `make_char_constant`, `duplicate_constant_value`),
  the declared objects with their scopes, `find_object`, and `SymbolTable`.
  A new `SymbolTable` already holds the global functions `READC` and `READI`
  and the procedures `WRITEI`, `WRITEC` and `WRITELN`.
- `kplc.debug`: `format_type`, `format_constant_value`, `format_object`,
  `format_object_list` and `format_scope` render the symbol table as text.
- `kplc.wordindex`: `load_stopwords`, `build_index`, `format_index` and
  `IndexEntry`.

## What it does not do

The package stops at scanning and at a hand-built symbol table. It has no
parser, no semantic checking and no code generation, so it cannot compile a
KPL program. The parse-error codes in `ErrorCode` and `MissingTokenError`
exist, but no part of the package raises them.