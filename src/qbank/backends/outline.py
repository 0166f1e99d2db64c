"""
Plain-text outline generator for compiled forms.

Renders an instruction stream as an indented outline so a question bank
can be reviewed before any form is created.

Supports two modes:
    - SIMPLE: Page titles and item titles
    - DETAILED: Adds kinds, required markers, help text and options
"""

from enum import Enum
from typing import List, Sequence

from qbank.model import FormInstruction, FormMeta, Item, PageBreak


class OutlineMode(Enum):
    """Rendering modes for outline output."""
    SIMPLE = "simple"
    DETAILED = "detailed"


def _item_line(item: Item, mode: OutlineMode) -> str:
    if mode == OutlineMode.SIMPLE:
        return f"  - {item.title}"
    marker = " *" if item.required else ""
    return f"  - [{item.kind.value}] {item.title}{marker}"


def generate_outline(
    meta: FormMeta,
    instructions: Sequence[FormInstruction],
    mode: OutlineMode = OutlineMode.SIMPLE,
) -> str:
    """
    Generate an outline for a compiled form.

    Args:
        meta: Form title and description
        instructions: Compiled instruction stream
        mode: Rendering mode

    Returns:
        Outline text, one instruction per line (options on extra lines)
    """
    lines: List[str] = [meta.title]
    if mode == OutlineMode.DETAILED:
        lines.append(meta.description)
        if meta.version:
            lines.append(f"Version: {meta.version}")
    lines.append("=" * max(len(meta.title), 1))

    for instruction in instructions:
        if isinstance(instruction, PageBreak):
            lines.append("")
            lines.append(f"## {instruction.title}")
            if mode == OutlineMode.DETAILED and instruction.help_text:
                lines.append(f"   {instruction.help_text}")
        elif isinstance(instruction, Item):
            lines.append(_item_line(instruction, mode))
            if mode == OutlineMode.DETAILED:
                for option in instruction.options:
                    lines.append(f"      o {option}")

    return "\n".join(lines)


def save_outline_file(
    meta: FormMeta,
    instructions: Sequence[FormInstruction],
    filename: str,
    mode: OutlineMode = OutlineMode.SIMPLE,
) -> None:
    outline = generate_outline(meta, instructions, mode=mode)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(outline)


__all__ = ["OutlineMode", "generate_outline", "save_outline_file"]
