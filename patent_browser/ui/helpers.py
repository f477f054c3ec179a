from __future__ import annotations

from typing import Iterable, List, Optional

from patent_browser.core.aggregations import Summary
from patent_browser.services.dashboard_service import filter_options


def to_options(values: Iterable[str]) -> List[dict]:
    return [{"label": v, "value": v} for v in values]


def searched_options(
    all_values: List[str],
    search: Optional[str],
    selected: Optional[Iterable[str]] = None,
) -> List[dict]:
    """
    Dropdown options narrowed by the search box.

    Selected values are always kept (first) so the dropdown never drops a
    value the user already picked just because it no longer matches the search.
    """
    known = set(all_values)
    selected = [v for v in (selected or []) if v in known]
    matches = filter_options(all_values, search or "")
    union = list(dict.fromkeys(selected + matches))
    return to_options(union)


def count_label(name: str, n_total: int, n_selected: int) -> str:
    return f"{name} ({n_total} total, {n_selected} selected)"


def year_label(year_range) -> str:
    lo, hi = year_range
    return f"Year Range: {lo} - {hi}"


def summary_texts(summary: Summary) -> tuple[str, str, str, str]:
    """Card texts: total patents, countries, top country, avg growth."""
    growth = f"{summary.avg_growth}%"
    if summary.avg_growth_is_placeholder:
        growth = f"{growth} (placeholder)"
    return (
        f"{summary.total_patents:,}",
        str(summary.country_count),
        summary.top_country or "-",
        growth,
    )


def clicked_value(click_data: Optional[dict]) -> Optional[str]:
    """
    Pull the country/technology carried by a clicked point.

    Bars and pie slices carry it in customdata; stacked-area traces carry it
    per point as well. Falls back to the pie label / bar x.
    """
    if not click_data:
        return None
    points = click_data.get("points") or []
    if not points:
        return None
    point = points[0]

    custom = point.get("customdata")
    if isinstance(custom, list):
        custom = custom[0] if custom else None
    if custom:
        return str(custom)

    for key in ("label", "x"):
        if point.get(key) not in (None, ""):
            return str(point[key])
    return None
