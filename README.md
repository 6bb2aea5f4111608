# ascii-view

Show an image in the terminal as coloured ASCII art.

The image is shrunk by averaging blocks of pixels, one block per character
cell. Brighter blocks get denser characters, taken from ` .-=+*x#$&X@`. Each
character of a colour image is also tinted with the nearest basic ANSI colour.
Grayscale images are drawn in white. If you turn on edge detection, strong
edges are drawn as `|`, `/`, `\` and `_`, chosen by the direction of the edge.

## Installation

```
pip install .
```

Pillow is used to read the image files, so any format Pillow can open will
work.

## Usage

```
ascii-view <path/to/image> [OPTIONS]
```

| Option            | Meaning                                                                      |
|-------------------|------------------------------------------------------------------------------|
| `-mw <width>`     | Maximum width in characters (default: terminal width, or 64)                 |
| `-mh <height>`    | Maximum height in characters (default: terminal height, or 48)               |
| `-et <threshold>` | Edge detection threshold, from 0.0 to 4.0 (default: 4.0, which turns it off) |
| `-cr <ratio>`     | Height-to-width ratio of a terminal character (default: 2.0)                 |

The terminal size is read from standard input when it is a terminal.

Run `ascii-view -h`, or `ascii-view` with no arguments, to print the help. In
both cases the exit status is 1.

Options must come after the image path. Unknown options are ignored. Numbers
are read from the start of the value, so `-mw 80px` means 80, and a value with
no number in front counts as 0. The command fails with an error message and
exit status 1 if:

- an option has no value,
- a width or height is negative,
- the image cannot be loaded,
- the image cannot be resized, for example because a limit works out to zero.

Examples:

```
ascii-view photo.png
ascii-view photo.jpg -mw 120 -et 2.5
```

The image keeps its proportions while being scaled to fit the maximum width
and height. The height is divided by the character ratio, because terminal
characters are taller than they are wide. The image is meant to be scaled
down. When it is enlarged, some character cells have no source pixels and come
out blank.

## Library use

```python
from ascii_view.image import load_image, resize
from ascii_view.render import print_image, render

image = load_image("photo.png")
small = resize(image, 80, 40, 2.0)
print_image(small, 4.0)        # write to standard output
text = render(small, 3.0)      # or get the ANSI-coloured text as a string
```

- `ascii_view.image` holds the `Image` class, with `pixel` and `set_pixel`.
  Values are floats in [0, 1], one to four channels per pixel. The module also
  has `load_image`, `resize`, `grayscale`, `convolve` (any 3x3 kernel) and
  `sobel`. `load_image` raises `ImageError` when a file cannot be read.
- `ascii_view.render` holds `rgb_to_hsv`, `color_code`, `ascii_char`,
  `edge_char`, `render` and `print_image`. `print_image` takes an optional
  `file` to write to.
- `ascii_view.options` holds the `Options` dataclass, `parse_args`,
  `help_text` and `terminal_size`. `parse_args` raises `OptionsError` when it
  cannot read the command line.
- `ascii_view.cli.main` runs the command. It returns the exit status.

## Limitations

The output always contains ANSI colour codes, and no option turns them off. The
program shows one still image and then exits. It does not animate, does not
watch the file for changes, and does not save its output anywhere other than
standard output.