# tinycomp

`tinycomp` compiles programs written in a small toy language into
assembly for a simple accumulator machine. A single run scans, parses,
checks and generates code. It writes two files next to the input:

- `<input>.preorder` holds an indented pre-order listing of the parse tree
- `<input>.asm` holds the generated assembly

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Command line

To compile a file:

```
tinycomp program.txt
```

This writes `program.txt.preorder` and `program.txt.asm`.

To compile from standard input:

```
tinycomp < program.txt
```

When no file is named, the program is read from standard input and the
output files are called `filename.preorder` and `filename.asm` in the
current directory.

The same command can also be run as `python -m tinycomp.cli`.

Exit status:

- `0` means the program compiled
- `1` means a scanner, parser, semantic or code-generation error. The
  message goes to standard error, prefixed with the error's class name
- `2` means the input file could not be opened
- `3` means more than one argument was given

The `.preorder` file is written before the semantic checks run. A program
that fails those checks therefore still leaves its tree listing behind,
but no `.asm` file.

## The language

Comments start and end with `*`. Inside a comment every character
becomes a space and newlines are kept, so line numbers stay correct.
Outside comments, only ASCII letters, digits, whitespace and the
characters `!` through `+` are allowed.

There are three kinds of token:

- **t1** is a single punctuation character, one of `" # ! $ ' & % ( )`
- **t2** is an identifier: `+` followed by digits, for example `+1` or `+42`
- **t3** is an integer literal: a letter followed by digits. An
  upper-case letter makes the value positive and a lower-case letter
  makes it negative, so `A12` is 12 and `b7` is -7

The grammar:

```
S -> A ( B B )
A -> " t2 | empty
B -> A | C | D | E | G | S
C -> # t2 | ! F
D -> $ F
E -> ' F F F B
F -> & F F | t2 | t3
G -> t2 % F
```

An identifier is declared by `" t2` or `# t2`. It may be declared only
once, and it must be declared before it is used anywhere else in a
pre-order walk of the tree.

In the generated assembly, the identifier `+N` becomes the variable `pN`
and temporaries are named `T0`, `T1` and so on. The program ends with
`STOP`, followed by every declared variable in sorted order and then every
temporary, each initialised to `0`.

## Library use

```python
from tinycomp.parser import parse
from tinycomp.semantics import check_semantics
from tinycomp.tree import format_preorder
from tinycomp.codegen import generate

source = '"+1 ( #+2 $+2 )'
tree = parse(source)
print(format_preorder(tree))
symbols = check_semantics(tree)
print(generate(tree, symbols))
```

The modules:

- `tinycomp.tokens` has `TokenType`, `Token` and `Node`, along with the
  exceptions `CompilerError`, `ScannerError`, `ParserError`,
  `SemanticError` and `CodeGenError`
- `tinycomp.scanner` has `resolve_char`, `Scanner` (with `next_token()`)
  and `tokenize`, which returns every token up to and including the EOF
  token
- `tinycomp.parser` has `preprocess` (strips comments and rejects invalid
  characters), `Parser` (with `parse()`) and `parse`
- `tinycomp.tree` has `format_preorder` and `write_preorder`, which
  writes `<base>.preorder` and returns its path
- `tinycomp.semantics` has `SymbolTable` (with `declare()`, membership
  tests, sorted iteration and `len()`) and `check_semantics`
- `tinycomp.codegen` has `t2_to_variable`, `t3_to_int`,
  `CodeGenerator` (with `generate()`), `generate` and `write_asm`, which
  writes `<base>.asm` and returns its path
- `tinycomp.cli` has `main`, the command-line entry point

Every error is raised as a subclass of `CompilerError`.

## What it does not do

`tinycomp` only produces assembly text. It has no assembler and no
virtual machine, so it cannot run the generated `.asm` files.