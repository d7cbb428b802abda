# inlinetext

Small helpers for writing long or multi-line strings inline in your code
and getting back exactly the text you meant. The package has three
modules, `inlinetext.collapse`, `inlinetext.concat` and
`inlinetext.dedent`, each with one function of the same name. It has no
dependencies beyond the standard library.

## Installation

```
pip install inlinetext
```

## Collapsing whitespace

`collapse(text)` removes leading and trailing ASCII whitespace and turns
every internal run of spaces, tabs, newlines, carriage returns and form
feeds into a single space. Other whitespace, such as non-breaking
spaces, is left alone. It is handy for SQL written across several lines:

```python
from inlinetext.collapse import collapse

query = collapse("""
    SELECT t.* FROM table t
    INNER JOIN jtable j ON j.t_id = t.id
    WHERE j.status IN (
      'yes', 'maybe'
    );
""")
assert query == (
    "SELECT t.* FROM table t INNER JOIN jtable j ON j.t_id = t.id "
    "WHERE j.status IN ( 'yes', 'maybe' );"
)
```

Passing anything other than a string raises `TypeError`.

## Concatenating pieces

`concat(*args)` joins its string arguments together, in order. Called
with no arguments it returns an empty string. Only strings are accepted;
anything else raises `TypeError`.

```python
from inlinetext.concat import concat

text = concat(
    "This is a text ",
    "that might span ",
    "multiple lines.\n",
    "But only if you ",
    "manually add the ",
    "LFs.\n",
)
assert text == (
    "This is a text that might span multiple lines.\n"
    "But only if you manually add the LFs.\n"
)
```

## Dedenting blocks

`dedent(text, keep_ws=0)` removes the common leading indentation from a
block of text. Lines holding only whitespace become empty, and `keep_ws`
keeps that many indentation characters in front of every line.

```python
from inlinetext.dedent import dedent

assert dedent("\n      SIX\n    FOUR\n  TWO") == "\n    SIX\n  FOUR\nTWO"

code = dedent(
    "fn main() {\n"
    "            println!(\"Hello world!\");\n"
    "        }\n",
    keep_ws=4,
)
assert code == '    fn main() {\n        println!("Hello world!");\n    }\n'
```

If the first line does not start with a space or a tab, it is left out of
the indentation analysis and, unless it is blank, gets `keep_ws`
indentation characters of the detected style put in front of it. This
suits text whose first line had its indentation already stripped away.

Lines are split on `\n`; a `\r` just before a `\n` is dropped with the
line ending. The result is always joined with `\n`.

Indentation may use spaces or tabs, but not both. Mixing them on one line,
or using spaces on some lines and tabs on others, raises
`MixedIndentationError`, a subclass of `ValueError`:

```python
from inlinetext.dedent import MixedIndentationError, dedent

try:
    dedent("  line\n\t\tline\n")
except MixedIndentationError as exc:
    print(exc)
```

Other errors:

- `TypeError` if `text` is not a string or `keep_ws` is not an integer
  (booleans are refused too).
- `ValueError` if `keep_ws` is negative.
- `ValueError` if a line is shorter in indentation than the amount being
  removed and the cut would fall inside a multi-byte character.