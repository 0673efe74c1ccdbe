"""Small CAD shell: cube and sphere meshes to STL, 2D sketches to DXF."""

__version__ = "0.0.1"
__all__ = ["cli", "commands", "geometry", "sketch"]