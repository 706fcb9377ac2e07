"""Zigzag: hachure segments chained end to start into one continuous stroke."""

from __future__ import annotations

from roughsketch.engine.fillers.hachure import HachureFiller


class ZigzagFiller(HachureFiller):
    connect = True
