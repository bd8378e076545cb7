# stkit

Building blocks for a terminal emulator that work without any display
server. Everything here is plain computation on Python values, apart from
two helpers that start another program.

## Modules

- `stkit.boxdraw`: rectangle geometry for box-drawing, block-element,
  shade and braille characters (U+2500–U+259F and U+2800–U+28FF).
  `is_boxdraw(u, boxdraw, braille)` tells whether a codepoint is drawn as
  rectangles. `boxdraw_index(u, bold, boxdraw_bold, braille)` returns the
  16-bit shape index. `draw_box(x, y, w, h, fg, bg, bd)` and
  `draw_boxes(x, y, cw, ch, fg, bg, indices)` return lists of `Fill`, each
  holding a `Rect` and a `Color`. `shade_color(fg, bg, level)` blends
  `level` quarters of `fg` over `bg`. The `BOXDATA` table and the category
  and stroke constants (`BDL`, `BDA`, `BBD`, …) are public.
- `stkit.colors`: `Color`, an RGBA value with 16-bit channels;
  `clamp(value, lower, upper)`; `change_alpha(alpha, delta)` to step
  window opacity within 0..1; `invert_color(color)`, which inverts the
  channels and keeps the alpha.
- `stkit.farbfeld`: `read_farbfeld(stream)` and `load_farbfeld(path)`
  return a `FarbfeldImage` (width, height, and pixels as 32-bit
  `0xAARRGGBB`). A short file, a bad magic value or an unreadable file
  raise `FarbfeldError`. `convert_pixel(value)` converts one raw pixel.
- `stkit.urls`: `find_previous_url(lines, start_row, top, bottom)` searches
  the screen lines upwards, wrapping around, and returns a `UrlMatch`
  (`row`, `column`, `url`, `end`) or `None`. `trim_url(text)` cuts text at
  the first character that cannot belong to a URL, and
  `find_last_any(text, needles)` gives the last index where any needle
  starts.
- `stkit.dnd`: `url_decode(src, escchars)` decodes `%xx` escapes and
  backslash-escapes the characters in `escchars`. `paste_data(data,
  escchars)` turns a dropped URI list, one per line, into paste text,
  dropping a leading `file://`.
- `stkit.iso14755`: `parse_codepoint(text)` reads a hexadecimal codepoint
  typed at a prompt, `utf8_encode(codepoint)` encodes it (invalid values
  become U+FFFD), and `prompt_codepoint(command)` runs the prompt command
  (by default `dmenu`) through the shell and parses its answer.
- `stkit.externalpipe`: `ScreenLine` describes one screen row;
  `screen_text(lines)` builds the text sent to a command and
  `external_pipe(argv, lines)` starts `argv` and writes that text to its
  standard input, returning the `subprocess.Popen` or `None`.
- `stkit.keymap`: `Modifier` flags, `XK_*` keysym constants, the `Key`
  binding with `Key.matches(...)`, `is_mapped(keysym)` and
  `find_key(keys, keysym, state, appkeypad, appcursor)`, which returns the
  first binding that applies.
- `stkit.termkeys_nav`: `keypad_keys()`, bindings for the cursor, editing,
  function and keypad keys.
- `stkit.termkeys_chars`: `char_keys()`, bindings for modified letters,
  digits, space and punctuation, and `default_keys()`, the whole table.

## Example

```python
from stkit.boxdraw import boxdraw_index, draw_box
from stkit.colors import Color
from stkit.keymap import XK_Up, Modifier, find_key
from stkit.termkeys_chars import default_keys

white, black = Color(0xFFFF, 0xFFFF, 0xFFFF), Color(0, 0, 0)
bd = boxdraw_index(0x2500, bold=False, boxdraw_bold=False, braille=True)
for fill in draw_box(0, 0, 8, 16, white, black, bd):
    print(fill.rect)

key = find_key(default_keys(), XK_Up, Modifier.SHIFT, appkeypad=False, appcursor=False)
print(repr(key.string))  # '\x1b[1;2A'
```

## What it does not do

stkit is not a terminal emulator by itself. It opens no window, draws
nothing on screen (it only computes rectangles and colours), runs no
pseudo-terminal or shell, parses no escape sequences from programs, and
talks to no clipboard or drag-and-drop protocol. Those are left to the
program that uses it.

## Tests

```
pip install -e .[test]
pytest
```