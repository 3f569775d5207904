# tomchase

Building blocks for a small tile-based maze game. The package holds pure
Python code with no dependencies outside the standard library.

- `tomchase.xpm` decodes XPM images into 32-bit pixel lists.
- `tomchase.colors` looks up X11 colour names.
- `tomchase.chars`, `tomchase.strutil`, `tomchase.memory` and `tomchase.chain`
  provide small helpers for characters, strings, byte buffers and a singly
  linked list.

## Installing

```
pip install .
```

## XPM images

```python
from tomchase.xpm import parse_xpm, xpm_file_to_image, TRANSPARENT

image = parse_xpm([
    "2 1 2 1",
    "a c #FF0000",
    "b c None",
    "ab",
])
assert (image.width, image.height) == (2, 1)
assert image.pixels == [0xFF0000, TRANSPARENT]

tile = xpm_file_to_image("tile.xpm")
```

- `parse_xpm(lines)` reads the header line (width, height, number of colours,
  characters per pixel), then the colour lines, then one line per pixel row. It
  returns an `XpmImage` with `width`, `height` and `pixels`, listed row by row.
  A colour of `None` becomes `TRANSPARENT` (`0xFF000000`). A pixel code that
  has no colour definition becomes 0.
- `xpm_data_to_image(xpm_data)` does the same for a list of strings.
- `xpm_file_to_image(path)` reads a `.xpm` file. It removes `/* */` and `//`
  comments that are outside quoted strings, then decodes the quoted strings.
- Missing or malformed data raises `XpmError`, which is a `ValueError`. An
  unreadable file also raises `XpmError`.
- The lower-level helpers are `split_words`, `strip_comments`, `text_to_rgb`,
  `str_str` and `str_str_quoted`.

## Colour names

`tomchase.colors.lookup_color(name)` returns the `0xRRGGBB` value of an X11
colour name, such as `"red"`, `"light blue"`, `"gray50"` or `"tomato3"`. The
lookup ignores ASCII case. `"none"` gives -1, and an unknown name gives 0.

## Helpers

- `tomchase.chars` has `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower`. They accept either an integer code or
  a one-character string.
- `tomchase.strutil` has `atoi`, `itoa`, `split`, `strchr`, `strrchr`,
  `strdup`, `striteri`, `strjoin`, `strlcat`, `strlcpy`, `strlen`, `strmapi`,
  `strncmp`, `strnstr`, `strtrim` and `substr`. They work on Python strings.
  Each string ends at its first NUL character. A function that finds a
  position returns an index, or `None` when there is no match.
- `tomchase.memory` has `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc`. They work on `bytes` and `bytearray`. An offset or
  length outside the buffer raises `ValueError`.
- `tomchase.chain.Chain` is a singly linked list made of `Node` objects. It has
  `push_front`, `push_back`, `last`, `remove_first`, `clear`, `for_each` and
  `map`, and it supports `len()` and iteration.

## What the package does not do

The package has no playable game. It does not read or validate `.ber` map
files, has no player movement or win logic, and has no window and no
command-line program. Its modules decode images and provide helpers that such a
game could build on.

## Running the tests

```
pip install .[test]
pytest
```