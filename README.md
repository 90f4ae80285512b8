# ftkit

A small collection of pure-Python utilities with no third-party dependencies.

## Modules

- `ftkit.strings`: string helpers.
  - `atoi(text)` parses a leading decimal integer (leading blanks, one sign,
    stops at the first non-digit, wraps to signed 32 bits).
  - `itoa(n)`, `split(text, sep)` (drops empty pieces), `strtrim(text, charset)`,
    `substr(text, start, length)`, `strnstr(haystack, needle, length)` (returns
    an index or -1), `strncmp(a, b, n)`, `memcmp(a, b, n)`, `strmapi(text, func)`,
    `striteri(text, func)` and `strjoin(a, b)`.
  - `strlcpy(src, size)` and `strlcat(dst, src, size)` return a tuple of the
    resulting text and the length they tried to create.
- `ftkit.chars`: `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`,
  `tolower`, `toupper` (each accepts a character code or a one-character
  string), and `strchr`, `strrchr`, `memchr`, which return an index or -1.
- `ftkit.printf`: `format_string(fmt, *args)` expands `%c %s %p %d %i %u %x %X %%`;
  `printf(fmt, *args)` writes the result to standard output and returns its
  length. `put_char`, `put_str`, `put_endl` and `put_nbr` write to a given
  stream, or to standard output when none is given.
- `ftkit.lines`: `LineReader(stream, buffer_size=4096)` reads a text or binary
  stream in fixed-size chunks and returns one line per `readline()` call
  (newline included, `None` at the end); it is also iterable.
  `read_lines(stream)` returns all lines as a list.
- `ftkit.colors`: `lookup_color(name)` gives the `0xRRGGBB` value of a colour
  name, ignoring case; `"none"` gives -1 and unknown names give 0.
- `ftkit.wordtab`: `find`, `find_outside_quotes` (skips matches inside double
  quotes) and `split_words` (splits on spaces and tabs).
- `ftkit.xpm`: an XPM reader. `parse_xpm(lines)` and `xpm_to_image(data)` take
  the pixmap strings, `load_xpm_file(path)` reads an XPM file written as C
  source. They return an `Image` with `width`, `height`, `pixels` and
  `pixel(x, y)`; transparent pixels are `0xFF000000`. Bad data raises
  `XpmError`. `parse_color_spec` and `strip_comments` are available as well.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.printf import format_string
from ftkit.strings import split, atoi
from ftkit.colors import lookup_color

format_string("%d items, %x hex", 42, 255)   # "42 items, ff hex"
split("  a  b c ", " ")                       # ["a", "b", "c"]
atoi("  -123abc")                             # -123
lookup_color("Sky Blue")                      # 0x87ceeb
```

Reading an XPM image:

```python
from ftkit.xpm import load_xpm_file, XpmError

try:
    image = load_xpm_file("icon.xpm")
except XpmError as exc:
    print("cannot read image:", exc)
else:
    print(image.width, image.height, hex(image.pixel(0, 0)))
```

Reading a file line by line:

```python
from ftkit.lines import LineReader

with open("scene.txt") as stream:
    for line in LineReader(stream, 42):
        print(line, end="")
```

## What it does not do

The package has no window, display or drawing support and no command-line
program: XPM images are decoded into pixel values only, and nothing renders
or shows them.

## Running the tests

```
pip install .[test]
pytest
```