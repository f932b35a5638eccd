# mcdoclex

Building blocks for reading MCDOC, the schema language that describes the
JSON files of Minecraft datapacks:

- `mcdoclex.lexer`: turns MCDOC source text into tokens with line, column and
  offset positions.
- `mcdoclex.errors`: the exception hierarchy for MCDOC errors, each error
  tagged with an `ErrorType`.
- `mcdoclex.resource`: resource identifiers such as `minecraft:diamond_sword`,
  and `RegistryDependency` records.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Tokenizing

```python
from mcdoclex.lexer import tokenize, TokenKind

for item in tokenize("translation?: [float @ -80..80] @ 3,"):
    print(item.position.line, item.position.column, item.token)
```

`tokenize(text)` returns a list of `TokenWithPos`. Each holds a `Token`
(a `TokenKind` in `kind`, and a `value`) and a `Position` with `line` and
`column` counted from 1 and `offset`, the UTF-8 byte offset counted from 0.

The lexer skips spaces, tabs, carriage returns, `//` line comments and nestable
`/* ... */` block comments. Newlines are returned as `NEWLINE` tokens. The
keywords `use`, `struct`, `enum`, `type`, `dispatch`, `to`, `super`, `true` and
`false` get kinds of their own. The following tokens carry a value:

- `IDENTIFIER` has its name.
- `STRING` has the text between the quotes. Both `"` and `'` can be used as
  quotes. Backslash escapes are kept as written.
- `NUMBER` has a `float`. Negative numbers such as `-80` or `-.5` come back as
  a single number token.
- `ANNOTATION` has the whole `#[...]` text, with nested brackets included.

Other punctuation produces its own kind: `::`, `..` and `...` are each read as
one token. The last token is always `EOF`.

`Lexer` can also be used one token at a time with `next_token()`, or iterated
directly. Iteration stops after the `EOF` token.

## Errors

Malformed input raises a `LexerError`, which is a subclass of `ParseError`.
Malformed input covers an unexpected character, an unterminated string, block
comment or annotation, and a `#` that is not followed by `[`.

Every `ParseError` reports its category through `error_type()`, and its
`SourcePos` through `position()` where one is known:

```python
from mcdoclex.errors import ErrorType, LexerError
from mcdoclex.lexer import tokenize

try:
    tokenize('"unterminated')
except LexerError as err:
    assert err.error_type() is ErrorType.LEXER
    print(err, err.position())
```

The other subclasses are `McDocSyntaxError`, `ResolutionError`,
`ValidationError`, `ContextError`, `InvalidResourceIdError`,
`ModuleMissingError` and `CircularDependencyError`.

## Resource identifiers

```python
from mcdoclex.resource import ResourceId

rid = ResourceId.parse("minecraft:diamond_sword")
rid.namespace                      # "minecraft"
rid.path                           # "diamond_sword"
ResourceId.parse("diamond_sword").namespace             # ""
ResourceId.parse("diamond_sword", "custom").namespace   # "custom"
str(rid)                           # "minecraft:diamond_sword"
```

An identifier that contains more than one colon raises
`InvalidResourceIdError`.

`RegistryDependency(registry, identifier, is_tag=False)` is a frozen record of
a reference to a registry entry or tag.

## What it does not do

This package only tokenizes MCDOC text. It has no parser that builds a syntax
tree from the tokens, no registry loading, and no validation of datapack JSON
against a schema. The syntax, resolution, validation, context, module and
dependency error classes are defined for such code to use. Nothing in this
package raises them. The only errors raised here are `LexerError` and
`InvalidResourceIdError`.

## Running the tests

```
pip install .[test]
pytest
```