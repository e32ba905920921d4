"""Procedural generation of 2D shapes, 3D paths and triangle meshes, with OBJ output."""

__version__ = "0.1.0"