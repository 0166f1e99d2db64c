"""Backends rendering compiled forms (plain-text outline, ...)."""

from .outline import OutlineMode, generate_outline, save_outline_file

__all__ = ["OutlineMode", "generate_outline", "save_outline_file"]
