"""Static formation template library.

Zones are (x, y) field-relative coordinates for a side attacking left to
right. Ids 13-22 are the outfield slots of the synthesized team; the
goalkeeper (id 23) is placed separately.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

DEFAULT_TEMPLATE = "4-3-3"
GOALKEEPER_ID = 23


@dataclass(frozen=True)
class TemplateSlot:
    id: int
    x: int
    y: int


def _slots(*entries: Tuple[int, int, int]) -> Tuple[TemplateSlot, ...]:
    return tuple(TemplateSlot(*entry) for entry in entries)


FORMATION_TEMPLATES: Mapping[str, Tuple[TemplateSlot, ...]] = MappingProxyType({
    "4-3-3": _slots(
        (13, 60, 120), (14, 60, 180),
        (15, 120, 90), (16, 120, 210),
        (17, 200, 100), (18, 200, 150), (19, 200, 200),
        (20, 300, 80), (21, 300, 150), (22, 300, 220),
    ),
    "3-5-2": _slots(
        (13, 80, 120), (14, 80, 180), (15, 80, 150),
        (16, 160, 90), (17, 160, 120), (18, 160, 180), (19, 160, 210),
        (20, 260, 120), (21, 260, 180), (22, 300, 150),
    ),
    "4-4-2": _slots(
        (13, 60, 120), (14, 60, 180),
        (15, 120, 90), (16, 120, 210),
        (17, 200, 90), (18, 200, 130), (19, 200, 170), (20, 200, 210),
        (21, 300, 130), (22, 300, 170),
    ),
    "4-2-3-1": _slots(
        (13, 60, 120), (14, 60, 180),
        (15, 120, 90), (16, 120, 210),
        (17, 200, 120), (18, 200, 180),
        (19, 240, 100), (20, 240, 150), (21, 240, 200),
        (22, 300, 150),
    ),
})


def get_template(label: str) -> Tuple[TemplateSlot, ...]:
    """Template for ``label``; unknown labels get the 4-3-3 template."""
    return FORMATION_TEMPLATES.get(label) or FORMATION_TEMPLATES[DEFAULT_TEMPLATE]
