"""Write SVG markup from render commands."""

from __future__ import annotations

from html import escape

from roughsketch.engine.render import Fill, RenderCommand
from roughsketch.svg.path_data import operations_to_path_data


def _num(v: float) -> str:
    return f"{v:.2f}".rstrip("0").rstrip(".")


def _paint_attrs(command: RenderCommand) -> dict[str, str]:
    style = command.style
    if isinstance(style, Fill):
        attrs = {"fill": escape(style.color), "stroke": "none"}
        if style.opacity < 1:
            attrs["fill-opacity"] = _num(style.opacity)
        return attrs
    attrs = {
        "fill": "none",
        "stroke": escape(style.color),
        "stroke-width": _num(style.width),
        "stroke-linecap": command.cap.value,
        "stroke-linejoin": command.join.value,
    }
    if style.opacity < 1:
        attrs["stroke-opacity"] = _num(style.opacity)
    return attrs


def serialize_commands(
    commands: list[RenderCommand] | tuple[RenderCommand, ...],
    width: float,
    height: float,
    title: str = "",
) -> str:
    """SVG document with one <path> per command.

    Clipped commands reference a <clipPath>; inverse clips use a <mask>
    that hides the clip region.
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {_num(width)} {_num(height)}" width="{_num(width)}"'
        f' height="{_num(height)}" xmlns="http://www.w3.org/2000/svg">',
    ]
    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    defs: list[str] = []
    body: list[str] = []
    for i, command in enumerate(commands):
        d = operations_to_path_data(command.ops)
        if not d:
            continue
        attrs = {"d": d, **_paint_attrs(command)}
        if command.clip_ops:
            clip_d = operations_to_path_data(command.clip_ops)
            if command.inverse_clip:
                defs.append(f'    <mask id="rs-mask-{i}" maskUnits="userSpaceOnUse">')
                defs.append('      <rect x="-100000" y="-100000" width="200000" height="200000" fill="white" />')
                defs.append(f'      <path d="{clip_d}" fill="black" />')
                defs.append("    </mask>")
                attrs["mask"] = f"url(#rs-mask-{i})"
            else:
                defs.append(f'    <clipPath id="rs-clip-{i}">')
                defs.append(f'      <path d="{clip_d}" />')
                defs.append("    </clipPath>")
                attrs["clip-path"] = f"url(#rs-clip-{i})"
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        body.append(f"  <path {attr_str} />")

    if defs:
        lines.append("  <defs>")
        lines.extend(defs)
        lines.append("  </defs>")
    lines.extend(body)
    lines.append("</svg>")
    return "\n".join(lines)
