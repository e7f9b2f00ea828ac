# comlayout

`comlayout` describes a window's layout in a small XML dialect and works out
where every control goes. It also reads and writes a plain `key = value`
configuration format that keeps comments and blank lines.

## Installing

```
pip install .
```

## Layouts

A layout document has a `Window` root whose `size` attribute gives the initial
client size. Inside it, `Font` elements register fonts, and the controls are
nested: `Vertical` and `Horizontal` stack their children, `Container`
stretches every visible child over its whole area, and `Button`, `Option`,
`Check`, `Static`, `Group` and `Edit` stand for native widgets.

```python
from comlayout.layout import Layout
from comlayout.geometry import Rect

xml = """
<Window size="300,200">
    <Font name="Sans" size="12" default="true"/>
    <Vertical inset="5,5,5,5">
        <Static name="title" text="Settings" height="30"/>
        <Horizontal>
            <Check name="enabled" text="Enabled" width="120"/>
            <Edit name="value" style="number"/>
        </Horizontal>
    </Vertical>
</Window>
"""

layout = Layout()
layout.set_layout(xml)
layout.resize(Rect(0, 0, 300, 200))

title = layout.find_control("title")
print(title.pos)        # the rectangle the control was given
```

Children with a fixed `width` or `height` keep it; the rest share what is
left, and the last flexible child takes any rounding remainder. `minwidth`,
`maxwidth`, `minheight` and `maxheight` bound the result, and `inset`
("left,top,right,bottom") shrinks the area a container gives its children.
Hidden children take no space: once initialised, a control hidden with
`set_visible(False)` makes its parent lay its children out again.

Controls can be given `name`, `id`, `font` (an index into the fonts
registered so far, `-1` for the default), `visible` and `display`; native
widgets also take `text`, `style` and `exstyle` (comma-separated names such
as `border`, `tabstop`, `multiline`, `readonly`), and `Check` takes `checked`.
An unknown style name raises `comlayout.widgets.StyleError`. A layout that
cannot be read raises `comlayout.builder.BuildError`.

`Layout.set_default_font` and `Layout.new_font` change fonts after the layout
is built.

When the laid-out content is larger than the client area, the layout turns on
its `vertical_bar` and `horizontal_bar` (`ScrollBar` objects);
`Layout.scroll(vertical, action, track_pos)` moves one with the line, page,
top/bottom and thumb actions of `ScrollAction` and shifts the widgets' window
rectangles by the returned amount.

The steps are usable on their own: `comlayout.markup.Markup` reads the XML
dialect into `MarkupNode` trees (raising `MarkupError` on bad input), and
`comlayout.builder.DialogBuilder` turns such a document into a tree of
controls from `comlayout.controls`, `comlayout.containers` and
`comlayout.widgets`. `comlayout.geometry` holds `Rect` and `Size`.

## Configuration files

```python
from comlayout.config import Config

cfg = Config()
cfg.load('; window settings\ngui.topmost = true\napp.title = "My Tool"\n')

cfg.get("gui.topmost").as_bool()     # True
cfg.set("comm.autosend.interval", 1000)
print(cfg.dumps())
```

Comments start with `;` or `#`, values containing spaces are written in
double quotes, and lines keep their order. `Config.load_file` reads a file of
at most 1 MiB and remembers its path; `Config.save_file` writes back to it or
to a path given.

## What it does not do

`comlayout` computes positions, visibility and fonts only. It does not open
windows, draw anything or handle input: the widgets keep their window state
(class, text, style, rectangle, visibility, font, checked state) in plain
in-memory objects, which a program has to carry over to a real toolkit itself.

## Running the tests

```
pip install .[test]
pytest
```