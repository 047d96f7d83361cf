"""Distribution of same-size items along one axis.

Given an available span, an item size and a count, computes where each item
starts. Overflowing configurations are computed through: when the items do
not fit, gaps simply come out negative and the caller sees the overflow.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import Distribution

__all__ = [
    "Distributed",
    "distribute",
]


@dataclass(frozen=True)
class Distributed:
    """Result of distributing items along an axis.

    Attributes:
        offsets: Start offset of each item, measured from the span start.
        gap: Effective gap between neighbouring items.
    """

    offsets: tuple[float, ...]
    gap: float

    def extent(self, item_size: float) -> float:
        """Length from the first item's near edge to the last item's far edge."""
        if not self.offsets:
            return 0.0
        return self.offsets[-1] + item_size - self.offsets[0]


def distribute(
    span: float,
    item_size: float,
    item_count: int,
    gap_hint: float,
    policy: Distribution | str,
) -> Distributed:
    """Compute item start offsets for a distribution policy.

    Policies:
    - fixed: items separated by exactly ``gap_hint``, starting at 0. The
      block is not stretched; the anchor decides where it sits.
    - space-between: first item at 0, last item ending at ``span``. A
      single item is centred with a gap of 0.
    - space-evenly: ``item_count + 1`` equal gaps including both ends.
    - space-around: end gaps are half the interior gap.

    Args:
        span: Available length along the axis.
        item_size: Size of every item along the axis.
        item_count: Number of items. Fewer than one yields no offsets.
        gap_hint: User-chosen gap, used by the fixed policy.
        policy: Distribution policy.

    Returns:
        Distributed offsets and the effective gap.

    Example:
        >>> distribute(96.0, 20.0, 3, 0.0, "space-between").offsets
        (0.0, 38.0, 76.0)
    """
    policy = Distribution(policy)
    if item_count < 1:
        return Distributed(offsets=(), gap=gap_hint)

    leftover = span - item_count * item_size

    if policy is Distribution.FIXED:
        gap = gap_hint
        start = 0.0
    elif policy is Distribution.SPACE_BETWEEN:
        if item_count == 1:
            return Distributed(offsets=(leftover / 2,), gap=0.0)
        gap = leftover / (item_count - 1)
        start = 0.0
    elif policy is Distribution.SPACE_EVENLY:
        gap = leftover / (item_count + 1)
        start = gap
    else:
        gap = leftover / item_count
        start = gap / 2

    offsets = tuple(start + i * (item_size + gap) for i in range(item_count))
    return Distributed(offsets=offsets, gap=gap)
