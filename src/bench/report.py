"""Console rendering for benchmark and demonstration results.

This module turns typed results into printable lines. It does no I/O
so the CLI decides where output goes.
"""

from __future__ import annotations

from core.types import BenchmarkResult, DemonstrationResult, Identifier, Payload


def format_number(number: int) -> str:
    """Group digits by thousands with spaces, e.g. 100000 -> '100 000'."""
    sign = "-" if number < 0 else ""
    digits = str(abs(number))
    groups: list[str] = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return sign + " ".join(groups)


def render_identifier(identifier: Identifier) -> str:
    """Render a key as text when printable ASCII, else as hex."""
    raw = bytes(identifier)
    if all(0x20 <= byte < 0x7F for byte in raw):
        return raw.decode("ascii")
    return f"0x{identifier.hex()}"


def render_payload(payload: Payload) -> str:
    """Render a payload for display."""
    if isinstance(payload, bytes):
        return payload.decode("utf-8", errors="replace")
    return payload


def render_demonstration(result: DemonstrationResult) -> list[str]:
    """Render the demonstration outcome as report lines."""
    lines = ["=== DEMONSTRATION ==="]
    if result.found is not None:
        lines.append(
            f"Found record: uid={render_identifier(result.found.identifier)}, "
            f"data={render_payload(result.found.payload)}"
        )
    missing = render_identifier(result.missing_key)
    if result.missing_found:
        lines.append(f"Record with uid={missing} found (unexpected)")
    else:
        lines.append(f"Record with uid={missing} not found (expected)")
    lines.append(f"Records in demo store: {result.record_count}")
    return lines


def render_benchmark_report(result: BenchmarkResult) -> list[str]:
    """Render benchmark statistics as report lines."""
    lines = [
        "=== BENCHMARK RESULTS ===",
        "Totals:",
        f"  records in store: {format_number(result.record_count)}",
        f"  lookups performed: {format_number(result.lookup_count)}",
        f"  records found: {format_number(result.found_count)}",
        f"  records not found: {format_number(result.not_found_count)}",
        f"  insert time: {result.insert_seconds * 1000:.0f} ms",
        "Lookup performance:",
        f"  total lookup time: {result.lookup_seconds * 1_000_000:.0f} us",
        f"  average per lookup: {result.average_lookup_microseconds:.3f} us",
        f"  lookups per second: {format_number(int(result.lookups_per_second))}",
        "Efficiency:",
        f"  estimated speedup over linear scan: ~{format_number(int(result.estimated_linear_speedup))}x",
    ]
    sample = result.linear_sample
    if sample is not None and sample.lookups:
        measured = sample.average_microseconds / max(result.average_lookup_microseconds, 1e-9)
        lines.extend(
            [
                f"  linear scan sample: {format_number(sample.lookups)} lookups, "
                f"{sample.average_microseconds:.3f} us average",
                f"  measured speedup over linear scan: ~{format_number(int(measured))}x",
            ]
        )
    return lines
