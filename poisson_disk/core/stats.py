"""Per-run sampling statistics and presentation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass
class SamplerStats:
    # outer-loop iterations; each retires one active point
    iterations: int = 0
    candidates: int = 0
    accepted: int = 0
    rejected_bounds: int = 0
    rejected_proximity: int = 0
    # Timing (seconds)
    time_total: float = 0.0

    def to_dict(self) -> Dict[str, Any]:  # pragma: no cover - simple mapping
        return {
            'iterations': self.iterations,
            'candidates': self.candidates,
            'accepted': self.accepted,
            'rejected_bounds': self.rejected_bounds,
            'rejected_proximity': self.rejected_proximity,
            # the seed point is accepted without being a candidate
            'acceptance_rate': ((self.accepted - 1) / self.candidates) if self.candidates else 0.0,
            'time_total': self.time_total,
            'points_per_sec': (self.accepted / self.time_total) if self.time_total > 0 else 0.0,
        }


def format_stats_table(stats_dict: Mapping[str, Mapping[str, Any]]) -> str:
    """Return a human readable multi-line table, one row per labelled run."""
    if not stats_dict:
        return "<no stats>"
    header = ["run", "points", "cands", "rejBox", "rejNear", "acc%", "ms"]
    rows = []
    for label in sorted(stats_dict.keys()):
        s = stats_dict[label]
        rows.append([
            str(label), str(s['accepted']), str(s['candidates']),
            str(s['rejected_bounds']), str(s['rejected_proximity']),
            f"{s['acceptance_rate'] * 100.0:6.2f}", f"{s['time_total'] * 1000.0:9.3f}",
        ])
    col_w = [len(h) for h in header]
    for r in rows:
        for i, v in enumerate(r):
            if len(v) > col_w[i]:
                col_w[i] = len(v)

    def fmt(r):
        return " ".join(r[i].rjust(col_w[i]) for i in range(len(r)))
    lines = [fmt(header), "-" * (sum(col_w) + len(col_w) - 1)] + [fmt(r) for r in rows]
    return "\n".join(lines)


__all__ = ['SamplerStats', 'format_stats_table']
