"""Render API records for the terminal."""

from __future__ import annotations

import json
from collections.abc import Sequence

from powerctl.lib.tibber.models import Home, PriceInfo, PricePoint

OUTPUT_FORMATS = ("pretty", "json")


def render_homes(homes: Sequence[Home], fmt: str) -> str:
    _check_format(fmt)
    if fmt == "json":
        return json.dumps(
            [home.model_dump(mode="json", by_alias=True) for home in homes],
            indent=2,
        )

    if not homes:
        return "No homes found."
    blocks = []
    for home in homes:
        address = home.address
        location = ", ".join(
            part
            for part in (address.address1, address.postal_code, address.city, address.country)
            if part
        )
        realtime = "yes" if home.features.real_time_consumption_enabled else "no"
        lines = [
            f"{home.app_nickname or '(unnamed)'} [{home.id}]",
            f"  Type:      {home.type or '-'}",
            f"  Size:      {f'{home.size} m²' if home.size is not None else '-'}",
            f"  Address:   {location or '-'}",
            f"  Real-time: {realtime}",
        ]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render_prices(price_info: PriceInfo, fmt: str) -> str:
    _check_format(fmt)
    if fmt == "json":
        return json.dumps(price_info.model_dump(mode="json", by_alias=True), indent=2)

    lines = []
    if price_info.current is None:
        lines.append("Current: no price available")
    else:
        lines.append(f"Current: {_format_point(price_info.current)}")
    for label, points in (("Today", price_info.today), ("Tomorrow", price_info.tomorrow)):
        lines.append("")
        if not points:
            lines.append(f"{label}: no prices published")
            continue
        lines.append(f"{label}:")
        lines.extend(f"  {_format_point(point)}" for point in points)
    return "\n".join(lines)


def _format_point(point: PricePoint) -> str:
    return (
        f"{point.starts_at:%Y-%m-%d %H:%M} {_amount(point.total)} {point.currency or ''}".rstrip()
        + f" ({point.level or 'UNKNOWN'}; energy {_amount(point.energy)}, tax {_amount(point.tax)})"
    )


def _amount(value: float | None) -> str:
    return "-" if value is None else f"{value:.4f}"


def _check_format(fmt: str) -> None:
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unsupported output format {fmt!r}; expected one of: {', '.join(OUTPUT_FORMATS)}"
        )
