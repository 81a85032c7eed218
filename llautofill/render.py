"""Applying fill instructions to a parsed BeautifulSoup document."""

from typing import Optional

from bs4.element import Tag

from .constants import SHADE_LEFT_RGB, SHADE_OPACITY, SHADE_RIGHT_RGB
from .models import FillInstruction, Shade

# Inline style properties this module owns on the result cell
_SHADE_PROPERTIES = (
    'background',
    'background-image',
    'background-size',
    'background-repeat',
    'text-align',
)


def _rgba(rgb: tuple[int, int, int], opacity: float) -> str:
    r, g, b = rgb
    return f'rgba({r}, {g}, {b}, {opacity:g})'


def shade_style(shade: Shade, opacity: float = SHADE_OPACITY) -> dict[str, str]:
    """
    CSS declarations for a half-and-half result cell background.

    Returns an empty dict when neither half is active (background cleared).
    """
    if not shade.active:
        return {}
    left = _rgba(SHADE_LEFT_RGB, opacity) if shade.left_red else 'transparent'
    right = _rgba(SHADE_RIGHT_RGB, opacity) if shade.right_green else 'transparent'
    return {
        'background-image': f'linear-gradient(to right, {left} 50%, {right} 50%)',
        'background-size': '100% 100%',
        'background-repeat': 'no-repeat',
        'text-align': 'center',
    }


def _parse_style(style: str) -> dict[str, str]:
    declarations = {}
    for part in style.split(';'):
        if ':' not in part:
            continue
        name, value = part.split(':', 1)
        declarations[name.strip().lower()] = value.strip()
    return declarations


def _apply_shade(cell: Tag, shade: Shade, opacity: float) -> None:
    declarations = {
        name: value
        for name, value in _parse_style(cell.get('style', '')).items()
        if name not in _SHADE_PROPERTIES
    }
    declarations.update(shade_style(shade, opacity))
    if declarations:
        cell['style'] = '; '.join(f'{name}: {value}' for name, value in declarations.items())
    elif cell.has_attr('style'):
        del cell['style']


def apply_fill_instructions(
    instructions: list[FillInstruction],
    opacity: Optional[float] = None,
) -> int:
    """
    Write fill instructions into their rows' cells.

    Each instruction's row_handle must be the RowCells produced by
    read_result_rows(). Cells whose instruction field is None are untouched.

    Args:
        instructions: Output of reconcile()
        opacity: Shade opacity (default: 0.15)

    Returns:
        Number of rows written
    """
    opacity = SHADE_OPACITY if opacity is None else opacity
    for instruction in instructions:
        cells = instruction.row_handle
        if instruction.result_text is not None:
            cells.result.string = instruction.result_text
            if instruction.tooltip_text is not None:
                cells.result['title'] = instruction.tooltip_text
            _apply_shade(cells.result, instruction.shade or Shade(), opacity)
        if instruction.record_text is not None:
            cells.record.string = instruction.record_text
        if instruction.rank_text is not None:
            cells.rank.string = instruction.rank_text
    return len(instructions)
