# cee

A tokenizer and parser for a small C-like language. It reads a source file,
splits it into tokens and builds a syntax tree of function definitions,
statements and expressions, and can print either of them back as text.

## Installation

```
pip install .
```

## Command line

```
cee <task> [...args]
```

Tasks:

- `cee tokens <file>`: print the file's tokens, separated by spaces, with a
  line break after each `;`, `{` and `}`. An empty file prints
  `no tokens available`.
- `cee ast <file>`: print the file's syntax tree as normalised source text;
  nested binary operations are wrapped in parentheses.

Exit status:

- `0` on success, and also when the task name is unknown (an
  `ERROR: unknown task "..."` line is printed).
- `1` when the task name or file path is missing (an error line and the usage
  text are printed), when the file cannot be opened, or when the file does not
  tokenize or parse (the error is printed).

The same entry point is `cee.cli.main(argv=None)`, which returns the exit
status instead of exiting.

## The language

```
# comments start with a hash and run to the end of the line
fun add(a: int, b: int): int {
    const sum: int = a + b * 2;
    if sum == 10 {
        print("ten");
    }
    return sum;
}
```

- Top-level definitions: `fun name(arg: type, ...): type { ... }`; the return
  type is optional.
- Statements: `const`/`var` definitions with an optional `= expression`,
  function calls, `if cond { ... }` blocks and `return` with an optional value.
  Each statement other than `if` ends with `;`.
- Expressions: identifiers, unsigned integers, double-quoted strings (no
  escapes), function calls, parentheses and the binary operators `*` `/`, then
  `+` `-`, then `==` `!=`, in that order of precedence, each tier grouping left
  to right.
- Identifiers start with a letter, `_` or `@` and continue with those or
  digits.

## Library use

```python
from cee.tokenize import tokenize_text
from cee.defs import parse_defs, load_scope
from cee.printer import format_def, format_scope, format_tokens

tokens = tokenize_text("fun main() {\n    return 0;\n}\n")
print(format_tokens(tokens), end="")
for definition in parse_defs(tokens):
    print(format_def(definition), end="")

print(format_scope(load_scope("example.cee")), end="")
```

Modules:

- `cee.chars`: character classes (`is_ident`, `is_digit`, ...).
- `cee.tokens`: `TokenType`, `Token`, `ParseError` and helpers for slicing
  token sequences at matching brackets.
- `cee.tokenize`: `tokenize_line`, `tokenize_text` and `tokenize(stream)`.
- `cee.nodes`: syntax tree dataclasses (`Func`, `Define`, `If`, `Return`,
  `Binop`, `Funcall`, `Scope`, ...).
- `cee.exprs`: `parse_expr` and `parse_funcall`.
- `cee.stats`: `parse_stat` and `parse_stats`.
- `cee.defs`: `parse_func_content`, `parse_def`, `parse_defs` and
  `load_scope(path)`.
- `cee.printer`: `format_expr`, `format_funcall`, `format_stat`,
  `format_def`, `format_scope` and `format_tokens`.
- `cee.cli`: `Task`, `UsageError`, `tokens_task`, `ast_task`, `usage`,
  `run_task` and `main`.

Malformed input raises `cee.tokens.ParseError`.

## What it does not do

- It stops at the syntax tree: there is no type checking, evaluation or code
  generation.
- `else`, `%`, `<`, `>`, `<=` and `>=` are recognised as tokens but are not
  accepted by the parser.
- Only `fun` definitions are accepted at the top level. The `ConstContent`,
  `Module` and `Project` node classes exist but nothing in the package builds
  them; `load_scope` reads one file into one `Scope`.