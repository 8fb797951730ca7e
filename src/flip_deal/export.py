"""Export analysis results to CSV and JSON."""

from __future__ import annotations

import csv
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .models import AnalysisResult


def _serialize(obj: Any) -> Any:
    """JSON serializer for datetime and other objects."""
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def export_csv(result: AnalysisResult, path: Path | str) -> None:
    """Export the ranked strategies to CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "rank",
        "strategy_id",
        "name",
        "investment",
        "profit",
        "roi",
        "duration_months",
        "risk_level",
        "feasibility",
        "recommended",
    ]
    recommended_id = result.strategies.recommended.id if result.strategies.recommended else None

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for i, s in enumerate(result.strategies.ranked, 1):
            writer.writerow({
                "rank": i,
                "strategy_id": s.id,
                "name": s.name,
                "investment": s.investment,
                "profit": s.profit,
                "roi": s.roi,
                "duration_months": s.duration_months,
                "risk_level": s.risk_level.value,
                "feasibility": s.feasibility,
                "recommended": s.id == recommended_id,
            })


def export_json(result: AnalysisResult, path: Path | str) -> None:
    """Export the full analysis to JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "run_at": datetime.now(timezone.utc),
        "analysis": result.to_dict(),
    }

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, default=_serialize)
