"""imgreview: git plumbing for a visual image-diff reviewer."""

__version__ = "0.1.0"
