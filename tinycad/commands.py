"""Command table and session state for the interactive CAD shell."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Callable, Sequence, TextIO

from .geometry import GeometryError, Modeler, export_dxf
from .sketch import Sketch, SketchFullError

_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
    r"|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?"
    r"|nan"
    r"))",
    re.IGNORECASE,
)
_INT_RE = re.compile(r"\s*([+-]?\d+)")

_HELP_LINES = (
    "Available commands:",
    "  cube <size>                 - Create a cube with specified size",
    "  c <size>                    - Alias for cube",
    "  sphere <radius>             - Create a sphere with specified radius",
    "  sp <radius>                 - Alias for sphere",
    "  save <filename>             - Save current shape to an STL file",
    "  s <filename>                - Alias for save",
    "  cube_div <count>            - Set cube subdivisions (for smoothness)",
    "  sphere_div <lat> <lon>      - Set sphere latitude and longitude subdivisions",
    "  sketch_point <x> <y>        - Add a point to the sketch",
    "  sketch_line <x1> <y1> <x2> <y2> - Add a line to the sketch",
    "  sketch_circle <x> <y> <radius>  - Add a circle to the sketch",
    "  sketch_clear                - Clear all sketch entities",
    "  export_dxf <filename>       - Export the sketch to a DXF file",
    "  help (h)                   - Show this help message",
    "  version (v)                - Show software version",
    "  exit (e)                   - Exit the program",
)


class CommandError(Exception):
    """Raised when a command is unknown, misused or fails."""


class ExitRequested(Exception):
    """Raised by the exit command to end the session."""


def c_atof(text: str) -> float:
    """Parse the longest leading number in ``text``; 0.0 when there is none."""
    match = _FLOAT_RE.match(text)
    if not match:
        return 0.0
    number = match.group(1)
    body = number.lstrip("+-")
    if body[:2].lower() == "0x":
        value = float.fromhex(body)
        return -value if number.startswith("-") else value
    return float(number)


def c_atoi(text: str) -> int:
    """Parse the leading decimal integer in ``text``; 0 when there is none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class _Command:
    name: str
    handler: Callable[["Session", Sequence[str]], None]
    description: str


class Session:
    """The current shape, the sketch and the commands acting on them."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self.modeler = Modeler()
        self.sketch = Sketch()
        self._commands = {command.name: command for command in _COMMANDS}

    def _print(self, text: str) -> None:
        print(text, file=self._out if self._out is not None else sys.stdout)

    def command_names(self) -> list[str]:
        """Return the registered command names in table order."""
        return list(self._commands)

    def execute(self, args: Sequence[str]) -> None:
        """Run the command named by ``args[0]`` with the remaining arguments."""
        if not args:
            raise CommandError("No command given")
        command = self._commands.get(args[0])
        if command is None:
            raise CommandError(f"Unknown command: {args[0]}. Type 'help' for a list.")
        try:
            command.handler(self, args)
        except (GeometryError, SketchFullError) as exc:
            raise CommandError(str(exc)) from exc

    def _cube(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            raise CommandError("Usage: cube <size> [divisions]")
        size = c_atof(args[1])
        divisions = c_atoi(args[2]) if len(args) >= 3 else None
        used = self.modeler.create_cube(size, divisions)
        self._print(f"Cube created with size {size:.2f} and {used} subdivisions")

    def _sphere(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            raise CommandError("Usage: sphere <radius> [divisions]")
        radius = c_atof(args[1])
        divisions = c_atoi(args[2]) if len(args) >= 3 else None
        used = self.modeler.create_sphere(radius, divisions)
        self._print(f"Sphere created with radius {radius:.2f} and {used} subdivisions")

    def _save(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            raise CommandError("Usage: save <filename>")
        self.modeler.save_stl(args[1])
        self._print(f"Saved STL file: {args[1]}")

    def _help(self, args: Sequence[str]) -> None:
        for line in _HELP_LINES:
            self._print(line)

    def _version(self, args: Sequence[str]) -> None:
        self._print("CAD, version 0.0 (Beta)")

    def _exit(self, args: Sequence[str]) -> None:
        self._print("Exiting the CLI. Thanks for using it!")
        raise ExitRequested()

    def _sketch_point(self, args: Sequence[str]) -> None:
        if len(args) != 3:
            raise CommandError("Usage: sketch_point <x> <y>")
        self.sketch.add_point(c_atof(args[1]), c_atof(args[2]))

    def _sketch_line(self, args: Sequence[str]) -> None:
        if len(args) != 5:
            raise CommandError("Usage: sketch_line <x1> <y1> <x2> <y2>")
        self.sketch.add_line(*(c_atof(a) for a in args[1:5]))

    def _sketch_circle(self, args: Sequence[str]) -> None:
        if len(args) != 4:
            raise CommandError("Usage: sketch_circle <x> <y> <radius>")
        self.sketch.add_circle(*(c_atof(a) for a in args[1:4]))

    def _sketch_list(self, args: Sequence[str]) -> None:
        for line in self.sketch.describe():
            self._print(line)

    def _sketch_clear(self, args: Sequence[str]) -> None:
        self.sketch.clear()
        self._print("Sketch cleared.")

    def _export_dxf(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            raise CommandError("Usage: export_dxf <filename>")
        export_dxf(self.sketch, args[1])
        self._print(f"Sketch exported to {args[1]}")


_COMMANDS = (
    _Command("cube", Session._cube, "cube <size>, cube_div <divisions>"),
    _Command("c", Session._cube, "Alias for cube"),
    _Command("sphere", Session._sphere, "sphere <radius>, sphere_div <lat_div> <lon_div>"),
    _Command("sp", Session._sphere, "Alias for sphere"),
    _Command("save", Session._save, "save <filename>"),
    _Command("s", Session._save, "Alias for save"),
    _Command("help", Session._help, "Shows this help message"),
    _Command("h", Session._help, "Alias for help"),
    _Command("version", Session._version, "Shows software version"),
    _Command("v", Session._version, "Alias for version"),
    _Command("exit", Session._exit, "Exit the program"),
    _Command("e", Session._exit, "Alias for exit"),
    _Command("sketch_point", Session._sketch_point, "Add a point: sketch_point <x> <y>"),
    _Command("sketch_line", Session._sketch_line, "Add a line: sketch_line <x1> <y1> <x2> <y2>"),
    _Command("sketch_circle", Session._sketch_circle, "Add a circle: sketch_circle <x> <y> <radius>"),
    _Command("sketch_list", Session._sketch_list, "List sketch entities"),
    _Command("sketch_clear", Session._sketch_clear, "Clear the sketch"),
    _Command("export_dxf", Session._export_dxf, "Export the sketch to a DXF file: export_dxf <filename>"),
)