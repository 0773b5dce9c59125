# saphire

An interpreter for Saphire, a small dynamically typed scripting language.
It has numbers, strings, booleans, arrays, hashes, first-class functions
and closures.

## Installation

```
pip install .
```

## Running programs

Start an interactive session:

```
saphire
```

The session greets you by your login name and shows a `>>` prompt. Each line
you type is parsed and evaluated, and its value is printed. Lines that have
no value, such as `let` statements, print nothing. Bindings made with `let`
stay available for later lines. The session ends at end of input.

Run a script file, which must have the `.sp` extension:

```
saphire program.sp
```

If the file has parse errors, they are printed and nothing runs. A file with
another extension, or one that cannot be read, gives a message on standard
error and exit status 1. Output from a script comes only from `print`.

## The language

```
// comments run to the end of the line
let add = fn(x, y) { x + y };
let newAdder = fn(x) { fn(y) { x + y } };
let addTwo = newAdder(2);
print(addTwo(3));

let numbers = [1, 2, 3];
print(push(numbers, 4));
print(len("hello"), first(numbers), last(numbers), rest(numbers));

let person = {"name": "Saphire", 1: true};
print(person["name"]);

if (2 ** 3 >= 8) { print("yes") } else { print("no") }
```

- Numbers are floating-point and are shown with two decimals (`5.00`).
- Operators: `+ - * / % **`, comparisons `< > <= >= == !=`, unary `!` and
  `-`. `%` works on the integer parts of its operands.
- Strings are written in double quotes, with no escape sequences, and may be
  joined with `+`.
- Identifiers are made of letters and `_`.
- Only `nil` and `false` count as false in conditions; an `if` without an
  `else` whose condition is false gives `nil`.
- Arrays are indexed from 0; an index out of range gives `nil`.
- Hash keys may be strings, numbers or booleans; a missing key gives `nil`.

Built-in functions:

| name    | does                                                      |
|---------|-----------------------------------------------------------|
| `len`   | bytes in a string, or elements of an array or hash        |
| `first` | first element of an array, `nil` if empty                 |
| `last`  | last element of an array, `nil` if empty                  |
| `rest`  | a new array without the first element, `nil` if empty     |
| `push`  | a new array with a value appended                         |
| `print` | prints each argument on its own line                      |

Runtime errors such as `type mismatch: NUMBER + BOOLEAN` or
`identifier not found: foo` are values; the interactive session shows them as
`ERROR: ...`.

## Using it from Python

```python
from saphire.parser import parse
from saphire.environment import Environment
from saphire.interpreter import evaluate

program, errors = parse("let x = 5; x * 2;")
if not errors:
    result = evaluate(program, Environment())
    print(result.inspect())  # 10.00
```

- `saphire.lexer.tokenize(source)` returns the list of tokens, ending with
  the EOF token; `saphire.lexer.Lexer` yields them one at a time.
- `saphire.parser.Parser(lexer).parse_program()` builds a `Program`; parse
  errors are collected in the parser's `errors` list.
- `saphire.interpreter.evaluate(node, env)` returns a runtime object from
  `saphire.objects` (`Number`, `String`, `Array`, `Hash`, `Error`, ...), or
  `None` for statements without a value.
- `saphire.repl.start(input_stream, output)` runs the interactive loop on any
  pair of text streams.
- `saphire.cli.run_source(source, output)` runs a whole program in a fresh
  environment, writes any parser errors to `output` and returns the result.
- `saphire.cli.read_source(filename)` reads a `.sp` file, raising
  `ValueError` for another extension.

## What it does not do

- Running a script does not report a runtime error: if the program ends in an
  error value, nothing is printed and the exit status is still 0.
- Calling a function with fewer arguments than it has parameters raises
  Python's `IndexError`, and `%` with a zero right operand raises
  `ZeroDivisionError`, rather than giving a language error value.
- There is no line editing or history in the interactive session.

## Tests

```
pip install .[test]
pytest
```