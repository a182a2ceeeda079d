# matrixclock

Pure-Python building blocks for an LED matrix clock. The package has no dependencies outside the standard library.

## Modules

### `matrixclock.fonts`

This module holds column-encoded bitmap fonts for an 8-pixel-high display. Each column byte has bit 0 at the top.

- `Font` is a table of glyphs with a fixed stride.
  - `glyph(index)` returns the visible column bytes of a glyph.
  - `width(index)` returns the glyph's column count.
  - `text_width(indices)` sums the widths of a run of glyphs.
  - `Font.from_table(table)` builds a font from a raw table whose first byte is the stride.
  - `len(font)` gives the number of glyphs.
- Digit fonts: `DIG3X8`, `DIG6X8`, `DIG4X8`, `DIG3X7`, `DIG3X6`, `DIG3X5`, `DIG5X8RN` and `DIG5X8SQ`. Each holds the digits 0–9. `DIG6X8` also has an eleventh, blank glyph.
- Weekday labels: `DWEEK_PL` and `DWEEK_EN`. Each runs Sunday first and ends with a degrees-Celsius sign.
- `FONT` is the text font. It covers printable ASCII, Polish letters, and a few symbols: `SMILE`, `FROWN`, `SURPRISE`, `HEART`, `ARROW_UP`, `ARROW_DOWN` and `DEGREE`.
- `char_index(char)` gives a character's glyph index in `FONT`. It raises `ValueError` for a character that has no glyph.

### `matrixclock.datestrings`

This module gives English month and weekday names: `month_str`, `month_short_str`, `day_str` and `day_short_str`.

- Months run from 1 to 12 and weekdays from 1 (Sunday) to 7.
- Index 0 is a placeholder. It gives `""` for the full month name and `"Err"` for the other three functions.
- Out-of-range values raise `ValueError`.

### `matrixclock.sensor`

This module models the HC-SR04 ultrasonic distance sensor. `SR04(echo_pin, trigger_pin, io)` drives the pins through an object you supply that implements the `PinIO` protocol. That protocol has the methods `pin_mode`, `digital_write`, `delay_microseconds`, `delay` and `pulse_in`.

- `distance()` takes one measurement, in centimetres.
- `distance_avg(wait=10, count=5)` takes `count + 2` readings. It drops the highest and the lowest reading and averages the rest.
- `ping()` measures once and stores the result in `last_distance`. Before the first ping, `last_distance` is 999.
- `microseconds_to_centimeters(duration)` converts an echo round trip to a distance. For example, 5882 µs gives 100 cm.

### `matrixclock.jsonbuffer`

`DynamicJsonBuffer(initial_size=256, alignment=8)` is a block allocator. When its newest block is full, it adds a new block twice the size of the last one.

- `alloc(nbytes)` returns an aligned `Allocation`. An `Allocation` has a writable `view` and can be converted with `bytes()`.
- `size()` reports the bytes in use.
- `clear()` releases everything.
- `start_string()` returns a `BufferString`. It is built with `append(char)` and terminated with `finish()`, which returns the text.

### `matrixclock.floatparts`

- `FloatParts.from_float(value, double=True)` splits a finite, non-negative float into four parts: `integral`, `decimal`, `decimal_places` and `exponent`. It works in double or single precision.
- `normalize(value, double=True)` brings large and tiny values into range by powers of ten. It returns the scaled value and the power removed.

### `matrixclock.printers`

These are text sinks. Each has a `print(value)` method that returns the number of characters written.

- `StaticStringBuilder(size)` keeps at most `size - 1` characters and drops the rest. Read the result from `value` or with `str()`.
- `DummyPrint` only counts characters, in `length`.
- `StreamPrintAdapter(stream)` writes to a text stream.

### `matrixclock.readers`

This module has character readers with one character of lookahead. Each reader has `current()`, `next()` and `move()`. At the end of the input they return `"\0"`.

- `CharReader` reads a `str` or `bytes`. It treats `None` as an empty string.
- `StreamReader` pulls characters from a stream only as they are needed. Anything after the parsed text stays in the stream.
- `string_equals(value, expected)` compares text given as `str` or `bytes`.
- `duplicate(value, buffer)` copies a string, followed by a zero byte, into a `DynamicJsonBuffer`.

## Example

```python
from matrixclock.datestrings import month_str, day_short_str
from matrixclock.fonts import FONT, char_index
from matrixclock.printers import StaticStringBuilder
from matrixclock.sensor import SR04

month_str(3)        # "March"
day_short_str(1)    # "Sun"

FONT.text_width(char_index(c) for c in "12:30")

sb = StaticStringBuilder(20)
sb.print("ABCDEFGHIJKLMNOPQRSTUVWXYZ")   # 19: one slot is kept for the terminator


class FakeIO:
    def pin_mode(self, pin, mode): pass
    def digital_write(self, pin, level): pass
    def delay_microseconds(self, us): pass
    def delay(self, ms): pass
    def pulse_in(self, pin, level, timeout): return 5882


SR04(echo_pin=2, trigger_pin=3, io=FakeIO()).distance()   # 100
```

## What it does not do

- It does not parse or serialize JSON documents. The buffer, float-splitting, printer and reader pieces are provided, but there is no parser or serializer built on them.
- It does not access hardware by itself. Pin I/O and timing come from the `PinIO` object you pass to `SR04`.
- There is no clock loop, display driver or command-line program.

## Install

```
pip install .
```

## Tests

```
pip install .[test]
pytest
```