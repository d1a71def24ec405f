"""Worked exercise solutions, terminal status lines and a rust-analyzer project file generator."""

__version__ = "5.5.1"