# Display scaling for block-style pictures.
# Large operands are shrunk to at most MAX_BLOCKS drawn units. The ratio between
# the operands is kept exact (GCD reduction) where it fits, otherwise it is
# approximated. Only rendering metadata comes out of here; answers never do.

from __future__ import annotations

import math
from typing import List

from formatting import round_half_up
from schemas.problems import DisplayScale, DragItem

MAX_BLOCKS = 100
MAX_ITEMS_PER_GROUP = 20
MAX_DRAG_BLOCKS = 15

_BLOCK = "■"


def _scale_addition(num1: int, num2: int) -> DisplayScale:
    if num1 + num2 <= MAX_BLOCKS:
        return DisplayScale(num1=num1, num2=num2)

    g = math.gcd(num1, num2) or 1
    r1, r2 = num1 // g, num2 // g
    multiplier = MAX_BLOCKS // (r1 + r2)
    if multiplier >= 1:
        d1, d2 = r1 * multiplier, r2 * multiplier
        factor = d1 / num1
    else:
        # e.g. 997 + 991: coprime, so approximate
        factor = MAX_BLOCKS / (num1 + num2)
        d2 = max(1, min(round_half_up(num2 * factor), MAX_BLOCKS - 1))
        d1 = max(1, min(round_half_up(num1 * factor), MAX_BLOCKS - d2))
    return DisplayScale(num1=d1, num2=d2, scale_factor=factor, scaled=True)


def _scale_subtraction(num1: int, num2: int) -> DisplayScale:
    if num1 <= MAX_BLOCKS:
        return DisplayScale(num1=num1, num2=num2)

    g = math.gcd(num1, num2) or 1
    r1, r2 = num1 // g, num2 // g
    multiplier = MAX_BLOCKS // r1
    if multiplier >= 1:
        d1, d2 = r1 * multiplier, r2 * multiplier
        factor = d1 / num1
    else:
        # e.g. 983 - 5: coprime, so approximate
        factor = MAX_BLOCKS / num1
        d1 = round_half_up(num1 * factor)
        d2 = max(1, min(round_half_up(num2 * factor), MAX_BLOCKS - 1))
    return DisplayScale(num1=d1, num2=d2, scale_factor=factor, scaled=True)


def _scale_division(dividend: int, divisor: int) -> DisplayScale:
    if dividend <= MAX_BLOCKS:
        return DisplayScale(num1=dividend, num2=divisor)

    quotient = dividend // divisor
    groups = min(MAX_BLOCKS // divisor, quotient)
    shown = groups * divisor  # still an exact multiple of the divisor
    return DisplayScale(num1=shown, num2=divisor, scale_factor=dividend / shown, scaled=True)


def _scale_multiplication(groups: int, per_group: int) -> DisplayScale:
    shown = min(per_group, MAX_ITEMS_PER_GROUP)
    return DisplayScale(
        num1=groups,
        num2=shown,
        scale_factor=shown / per_group if per_group else 1.0,
        scaled=shown != per_group,
    )


def scale_for_display(num1: int, num2: int, operator: str) -> DisplayScale:
    if operator == "-":
        return _scale_subtraction(num1, num2)
    if operator == "÷":
        return _scale_division(num1, num2)
    if operator == "×":
        return _scale_multiplication(num1, num2)
    return _scale_addition(num1, num2)


def number_blocks(num1: int, num2: int, operator: str) -> List[DragItem]:
    """Draggable unit blocks for each operand (capped) with the operator between."""
    items: List[DragItem] = []
    for i in range(min(num1, MAX_DRAG_BLOCKS)):
        items.append(DragItem(id=f"block-1-{i}", content=_BLOCK, value=1, type="number"))
    items.append(DragItem(id="operator", content=operator, value=operator, type="operator"))
    for i in range(min(num2, MAX_DRAG_BLOCKS)):
        items.append(DragItem(id=f"block-2-{i}", content=_BLOCK, value=1, type="number"))
    return items
