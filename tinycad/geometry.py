"""Solid shapes, STL triangulation and DXF export of sketches."""

from __future__ import annotations

import enum
import math
from pathlib import Path
from typing import Iterable, Iterator, Union

from .sketch import SketchCircle, SketchLine, SketchPoint

Vec3 = tuple[float, float, float]
Triangle = tuple[Vec3, Vec3, Vec3]

MIN_CUBE_DIVISIONS = 1
MIN_SPHERE_DIVISIONS = 3
MAX_DIVISIONS = 100

_DXF_HEADER = "0\nSECTION\n2\nHEADER\n0\nENDSEC\n0\nSECTION\n2\nENTITIES\n"
_DXF_FOOTER = "0\nENDSEC\n0\nEOF\n"


class GeometryError(Exception):
    """Raised for invalid shape parameters or failed exports."""


class ShapeKind(enum.Enum):
    NONE = "none"
    CUBE = "cube"
    SPHERE = "sphere"


def format_facet(a: Vec3, b: Vec3, c: Vec3) -> str:
    """Return the ASCII STL facet for triangle ``a, b, c`` with its unit normal."""
    ux, uy, uz = (b[i] - a[i] for i in range(3))
    vx, vy, vz = (c[i] - a[i] for i in range(3))
    nx = uy * vz - uz * vy
    ny = uz * vx - ux * vz
    nz = ux * vy - uy * vx
    length = math.sqrt(nx * nx + ny * ny + nz * nz)
    if length != 0.0:
        nx, ny, nz = nx / length, ny / length, nz / length

    def vertex(v: Vec3) -> str:
        return f"      vertex {v[0]:f} {v[1]:f} {v[2]:f}\n"

    return (
        f"  facet normal {nx:f} {ny:f} {nz:f}\n"
        "    outer loop\n"
        f"{vertex(a)}{vertex(b)}{vertex(c)}"
        "    endloop\n"
        "  endfacet\n"
    )


def cube_triangles(size: float, divisions: int) -> Iterator[Triangle]:
    """Yield the triangles of an axis-aligned cube centred on the origin."""
    if divisions < 1:
        raise GeometryError("Cube divisions must be at least 1")
    half = size / 2.0
    step = size / divisions
    cells = [
        (-half + i * step, -half + i * step + step, -half + j * step, -half + j * step + step)
        for i in range(divisions)
        for j in range(divisions)
    ]
    faces = [
        lambda p, q: (half, p, q),
        lambda p, q: (-half, p, q),
        lambda p, q: (p, half, q),
        lambda p, q: (p, -half, q),
        lambda p, q: (p, q, half),
        lambda p, q: (p, q, -half),
    ]
    for index, at in enumerate(faces):
        outward = index % 2 == 0
        for x0, x1, y0, y1 in cells:
            if outward:
                yield at(x0, y0), at(x1, y0), at(x1, y1)
                yield at(x0, y0), at(x1, y1), at(x0, y1)
            else:
                yield at(x0, y0), at(x1, y1), at(x1, y0)
                yield at(x0, y0), at(x0, y1), at(x1, y1)


def sphere_triangles(radius: float, lat_divisions: int, lon_divisions: int) -> Iterator[Triangle]:
    """Yield the triangles of a UV sphere centred on the origin."""
    if lat_divisions < 1 or lon_divisions < 1:
        raise GeometryError("Sphere divisions must be at least 1")

    def point(theta: float, phi: float) -> Vec3:
        return (
            radius * math.sin(theta) * math.cos(phi),
            radius * math.cos(theta),
            radius * math.sin(theta) * math.sin(phi),
        )

    for i in range(lat_divisions):
        theta1 = math.pi * i / lat_divisions
        theta2 = math.pi * (i + 1) / lat_divisions
        for j in range(lon_divisions):
            phi1 = 2 * math.pi * j / lon_divisions
            phi2 = 2 * math.pi * (j + 1) / lon_divisions
            v1 = point(theta1, phi1)
            v2 = point(theta2, phi1)
            v3 = point(theta2, phi2)
            v4 = point(theta1, phi2)
            if i == 0:
                yield v1, v2, v3
            elif i + 1 == lat_divisions:
                yield v1, v2, v4
            else:
                yield v1, v2, v3
                yield v1, v3, v4


SketchEntity = Union[SketchPoint, SketchLine, SketchCircle]


def _dxf_entity(entity: SketchEntity) -> str:
    match entity:
        case SketchPoint(x, y):
            return f"0\nPOINT\n8\n0\n10\n{x:.6f}\n20\n{y:.6f}\n30\n0.0\n"
        case SketchLine(x1, y1, x2, y2):
            return (
                f"0\nLINE\n8\n0\n10\n{x1:.6f}\n20\n{y1:.6f}\n30\n0.0\n"
                f"11\n{x2:.6f}\n21\n{y2:.6f}\n31\n0.0\n"
            )
        case SketchCircle(x, y, r):
            return f"0\nCIRCLE\n8\n0\n10\n{x:.6f}\n20\n{y:.6f}\n30\n0.0\n40\n{r:.6f}\n"
    raise TypeError(f"not a sketch entity: {entity!r}")


def dxf_text(entities: Iterable[SketchEntity]) -> str:
    """Return a minimal DXF document holding the given sketch entities."""
    return _DXF_HEADER + "".join(_dxf_entity(e) for e in entities) + _DXF_FOOTER


def export_dxf(entities: Iterable[SketchEntity], path: str | Path) -> None:
    """Write the sketch entities to ``path`` as DXF."""
    text = dxf_text(entities)
    try:
        with open(path, "w", encoding="ascii") as handle:
            handle.write(text)
    except OSError as exc:
        raise GeometryError(f"Failed to open file {path} for writing") from exc


class Modeler:
    """Holds the current solid shape and its tessellation settings."""

    def __init__(self) -> None:
        self.shape = ShapeKind.NONE
        self.size = 0.0
        self.cube_divisions = 1
        self.sphere_lat_divisions = 30
        self.sphere_lon_divisions = 30

    def create_cube(self, size: float, divisions: int | None = None) -> int:
        """Make the current shape a cube; return the subdivisions used."""
        if divisions is not None:
            if not MIN_CUBE_DIVISIONS <= divisions <= MAX_DIVISIONS:
                raise GeometryError("Cube divisions must be between 1 and 100")
            self.cube_divisions = divisions
        self.shape = ShapeKind.CUBE
        self.size = float(size)
        return self.cube_divisions

    def create_sphere(self, radius: float, divisions: int | None = None) -> int:
        """Make the current shape a sphere; return the subdivisions used."""
        if divisions is not None:
            if not MIN_SPHERE_DIVISIONS <= divisions <= MAX_DIVISIONS:
                raise GeometryError("Sphere divisions must be between 3 and 100")
            self.sphere_lat_divisions = divisions
            self.sphere_lon_divisions = divisions
        self.shape = ShapeKind.SPHERE
        self.size = float(radius)
        return self.sphere_lat_divisions

    def triangles(self) -> Iterator[Triangle]:
        """Yield the triangles of the current shape."""
        if self.shape is ShapeKind.CUBE:
            return cube_triangles(self.size, self.cube_divisions)
        if self.shape is ShapeKind.SPHERE:
            return sphere_triangles(self.size, self.sphere_lat_divisions, self.sphere_lon_divisions)
        raise GeometryError("No shape created yet")

    def stl_text(self) -> str:
        """Return the current shape as an ASCII STL document."""
        facets = "".join(format_facet(*tri) for tri in self.triangles())
        return f"solid shape\n{facets}endsolid shape\n"

    def save_stl(self, path: str | Path) -> None:
        """Write the current shape to ``path`` as ASCII STL."""
        try:
            handle = open(path, "w", encoding="ascii")
        except OSError as exc:
            raise GeometryError(f"Error opening file {path}: {exc.strerror}") from exc
        with handle:
            handle.write("solid shape\n")
            for tri in self.triangles():
                handle.write(format_facet(*tri))
            handle.write("endsolid shape\n")