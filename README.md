# tinycad

A small interactive CAD shell. It builds simple solids (a cube or a sphere),
writes them as ASCII STL meshes, and keeps a 2D sketch of points, lines and
circles that can be exported as a DXF file.

## Install

    pip install .

## Interactive use

Start the shell:

    tinycad

It prints a welcome banner and then a `cad>` prompt. Command names are
case-insensitive. End input with Ctrl-D, or type `exit`.

    Welcome to CAD CLI v0.0 (BETA)
    cad> cube 10 4
    Cube created with size 10.00 and 4 subdivisions
    cad> save box.stl
    Saved STL file: box.stl
    cad> sketch_line 0 0 5 5
    cad> sketch_circle 2 2 1
    cad> sketch_list
    Line from (0.000000, 0.000000) to (5.000000, 5.000000)
    Circle at (2.000000, 2.000000) with radius 1.000000
    cad> export_dxf drawing.dxf
    Sketch exported to drawing.dxf

### Commands

| Command | Alias | Description |
| --- | --- | --- |
| `cube <size> [divisions]` | `c` | Create a cube; divisions 1–100 (default 1, remembered) |
| `sphere <radius> [divisions]` | `sp` | Create a sphere; divisions 3–100 (default 30, remembered) |
| `save <filename>` | `s` | Save the current shape as STL |
| `sketch_point <x> <y>` | | Add a point to the sketch |
| `sketch_line <x1> <y1> <x2> <y2>` | | Add a line to the sketch |
| `sketch_circle <x> <y> <radius>` | | Add a circle to the sketch |
| `sketch_list` | | List the sketch entities |
| `sketch_clear` | | Clear the sketch |
| `export_dxf <filename>` | | Export the sketch as DXF |
| `help` | `h` | Show the command list |
| `version` | `v` | Show the version |
| `exit` | `e` | Leave the shell |

A line is split on spaces, and only its first ten words are used. Numbers are
read leniently: a word that does not start with a number counts as 0. Errors
such as a wrong argument count or an unknown command are printed and the shell
carries on. A sketch holds at most 1000 entities.

## Library use

```python
from tinycad.geometry import Modeler, export_dxf
from tinycad.sketch import Sketch

model = Modeler()
model.create_sphere(5.0, 12)
model.save_stl("ball.stl")

sketch = Sketch(1000)
sketch.add_point(1.0, 2.0)
sketch.add_circle(0.0, 0.0, 3.0)
export_dxf(sketch, "drawing.dxf")
```

`Modeler.triangles()` yields the facets of the current shape, and
`Modeler.stl_text()` returns the whole STL document as a string. The helpers
`cube_triangles`, `sphere_triangles`, `format_facet` and `dxf_text` in
`tinycad.geometry` are usable on their own. Saving before any shape exists
raises `GeometryError` (the file has already been opened by then, so it is
left holding only the `solid shape` line). Adding to a full sketch raises
`SketchFullError`. `Sketch.describe()` returns the same lines that
`sketch_list` prints.

The commands can also be driven from code through `tinycad.commands.Session`,
which takes an output stream and runs one tokenized command at a time with
`Session.execute`; failures raise `CommandError` and `exit` raises
`ExitRequested`. `tinycad.cli.run_cli(stdin, stdout)` runs the whole loop
over any pair of text streams.

## What it does not do

There is only the text shell: no graphical window or viewer. The `help`
text mentions `cube_div` and `sphere_div`, but they are not commands and the
shell answers them with "Unknown command"; set subdivisions with the optional
second argument of `cube` and `sphere` instead. Shapes are not kept between
sessions, and only one solid exists at a time.

## Tests

    pip install .[test]
    pytest