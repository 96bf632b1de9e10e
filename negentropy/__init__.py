"""Flowchart diagram editor: blocks on a pannable, zoomable grid, stored as XML workspace files."""

__version__ = "0.1.0"