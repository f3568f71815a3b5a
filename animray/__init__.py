"""Ray tracing building blocks: colours, matrices, shading, lights, animation and panel rendering."""

__version__ = "0.1.0"