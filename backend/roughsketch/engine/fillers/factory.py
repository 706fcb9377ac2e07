"""Fill style → filler dispatch. The style set is closed, so is the table."""

from __future__ import annotations

from roughsketch.engine.fillers.base import Filler
from roughsketch.engine.fillers.cross_hatch import CrossHatchFiller
from roughsketch.engine.fillers.dashed import DashedFiller
from roughsketch.engine.fillers.dots import DotsFiller
from roughsketch.engine.fillers.hachure import HachureFiller
from roughsketch.engine.fillers.scribble import ScribbleFiller
from roughsketch.engine.fillers.solid import SolidFiller
from roughsketch.engine.fillers.starburst import StarburstFiller
from roughsketch.engine.fillers.zigzag import ZigzagFiller
from roughsketch.engine.fillers.zigzag_line import ZigzagLineFiller
from roughsketch.engine.options import FillStyle

_STARBURST = StarburstFiller()

_FILLERS: dict[FillStyle, Filler] = {
    FillStyle.HACHURE: HachureFiller(),
    FillStyle.SOLID: SolidFiller(),
    FillStyle.ZIGZAG: ZigzagFiller(),
    FillStyle.CROSS_HATCH: CrossHatchFiller(),
    FillStyle.DOTS: DotsFiller(),
    FillStyle.DASHED: DashedFiller(),
    FillStyle.ZIGZAG_LINE: ZigzagLineFiller(),
    FillStyle.SUNBURST: _STARBURST,
    FillStyle.STARBURST: _STARBURST,
    FillStyle.SCRIBBLE: ScribbleFiller(),
}


def filler_for(fill_style: FillStyle) -> Filler:
    return _FILLERS[FillStyle(fill_style)]
