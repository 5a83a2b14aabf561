"""Formatting helpers for costs, times, sizes and tooltips."""

from __future__ import annotations

from heapview.allocationdata import AllocationData
from heapview.location import FileLine, Symbol

_BYTE_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
_COST_LABELS = (
    ("Peak", "peak"),
    ("Leaked", "leaked"),
    ("Allocations", "allocations"),
    ("Temporary Allocations", "temporary"),
)


def _escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def basename(path: str) -> str:
    """The part of ``path`` after the last slash."""
    return path.rpartition("/")[2]


def format_string(text: str) -> str:
    """``text`` or ``??`` when it is empty."""
    return text if text else "??"


def format_time(ms: int) -> str:
    """Milliseconds as minutes above one minute, seconds otherwise."""
    if ms > 60000:
        return f"{ms / 60000:.3g}min"
    return f"{ms / 1000:.3g}s"


def format_bytes(num_bytes: int) -> str:
    """A byte count with decimal SI prefixes and one fractional digit."""
    size = float(num_bytes)
    power = 0
    while abs(size) >= 1000.0 and power < len(_BYTE_UNITS) - 1:
        size /= 1000.0
        power += 1
    precision = 1 if power > 0 else 0
    return f"{size:.{precision}f} {_BYTE_UNITS[power]}"


def format_cost_relative(self_cost: int, total_cost: int, add_percent_sign: bool = False) -> str:
    """``self_cost`` as a percentage of ``total_cost``; empty when total is zero."""
    if not total_cost:
        return ""
    text = f"{self_cost * 100.0 / total_cost:.3g}"
    return text + "%" if add_percent_sign else text


def _symbol_header(symbol: Symbol) -> str:
    return "symbol: <tt>{}</tt><br/>binary: <tt>{} ({})</tt>".format(
        _escape_html(symbol.symbol), _escape_html(symbol.binary), _escape_html(symbol.path)
    )


def _cost_line(label: str, cost: int, total: int) -> str:
    return f"{label}: {cost}<br/>&nbsp;&nbsp;{format_cost_relative(cost, total)}% out of {total} total"


def _self_inclusive_sections(
    self_costs: AllocationData, inclusive_costs: AllocationData, total_costs: AllocationData
) -> str:
    parts = []
    for label, attr in _COST_LABELS:
        total = getattr(total_costs, attr)
        if not total:
            continue
        parts.append(
            "<hr/>"
            + _cost_line(f"{label} (self)", getattr(self_costs, attr), total)
            + "<br/>"
            + _cost_line(f"{label} (inclusive)", getattr(inclusive_costs, attr), total)
        )
    return "".join(parts)


def format_symbol_tooltip(symbol: Symbol, costs: AllocationData, total_costs: AllocationData) -> str:
    """HTML tooltip for a symbol with one set of costs."""
    parts = [_symbol_header(symbol)]
    for label, attr in _COST_LABELS:
        total = getattr(total_costs, attr)
        if total:
            parts.append("<hr/>" + _cost_line(label, getattr(costs, attr), total))
    return "<qt>" + "".join(parts) + "</qt>"


def format_symbol_costs_tooltip(
    symbol: Symbol,
    self_costs: AllocationData,
    inclusive_costs: AllocationData,
    total_costs: AllocationData,
) -> str:
    """HTML tooltip for a symbol with self and inclusive costs."""
    body = _symbol_header(symbol) + _self_inclusive_sections(self_costs, inclusive_costs, total_costs)
    return "<qt>" + body + "</qt>"


def format_location_tooltip(
    location: FileLine,
    self_costs: AllocationData,
    inclusive_costs: AllocationData,
    total_costs: AllocationData,
) -> str:
    """HTML tooltip for a source location with self and inclusive costs."""
    body = _escape_html(str(location)) + _self_inclusive_sections(self_costs, inclusive_costs, total_costs)
    return "<qt>" + body + "</qt>"