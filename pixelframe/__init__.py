"""RGBA images, depth-sorted render queue, vertex batching, XPM42/PNG textures and window state."""

__version__ = "0.1.0"