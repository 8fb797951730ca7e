"""CLI for the flip-deal property investment analyzer."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

import typer
import yaml
from rich.console import Console
from rich.table import Table

from .analysis import AnalysisEngine, apply_patch
from .config import load_config
from .exceptions import FlipDealError, PropertyInputError
from .export import export_csv, export_json
from .models import AnalysisResult, PropertyRecord, Recommendation, RiskLevel

app = typer.Typer(
    name="flip-deal",
    help="Buy-renovate-resell property analyzer - scores, strategies and risks",
)
console = Console()

_RECOMMENDATION_STYLE = {
    Recommendation.RECOMMENDED: "green",
    Recommendation.CONDITIONAL: "yellow",
    Recommendation.NOT_RECOMMENDED: "red",
}
_RISK_STYLE = {
    RiskLevel.LOW: "green",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.HIGH: "red",
}


def _load_property_file(path: Path) -> dict[str, Any]:
    """Read a YAML or JSON property mapping."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise PropertyInputError(f"Cannot read property file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise PropertyInputError(f"Invalid property file {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise PropertyInputError(f"Property file must be a mapping: {path}")
    return data


def _build_record(input_path: Optional[Path], overrides: dict[str, Any]) -> PropertyRecord:
    record = PropertyRecord()
    if input_path is not None:
        record = apply_patch(record, _load_property_file(input_path))
    return apply_patch(record, {k: v for k, v in overrides.items() if v is not None})


def _build_engine(config_path: Optional[Path]) -> AnalysisEngine:
    return AnalysisEngine(config=load_config(config_path))


def _display_strategies(result: AnalysisResult) -> None:
    comparison = result.strategies
    table = Table(title="Strategies (ranked by ROI)")
    table.add_column("Rank", style="dim")
    table.add_column("Strategy", style="cyan")
    table.add_column("Investment", justify="right")
    table.add_column("Profit", justify="right")
    table.add_column("ROI", justify="right")
    table.add_column("Months", justify="right")
    table.add_column("Risk")
    table.add_column("Feasibility", justify="right")

    for i, s in enumerate(comparison.ranked, 1):
        marker = " ★" if comparison.recommended is s else ""
        table.add_row(
            str(i),
            f"{s.name}{marker}",
            f"€{s.investment:,.0f}",
            f"€{s.profit:,.0f}",
            f"{s.roi:.1f}%",
            f"{s.duration_months:g}",
            s.risk_level.value,
            f"{s.feasibility}/10",
        )
    console.print(table)
    if comparison.recommended is None:
        console.print("[yellow]No strategy has a positive return.[/yellow]")


def _display_analysis(result: AnalysisResult) -> None:
    record = result.record
    fin = result.financials
    scores = result.scores

    title = record.title or "Property"
    if record.location:
        title = f"{title} ({record.location})"
    summary = Table(title=title, show_header=False)
    summary.add_column("Metric", style="dim")
    summary.add_column("Value", justify="right")
    summary.add_row("Total investment", f"€{fin.total_investment:,.0f}")
    summary.add_row("Gross profit", f"€{fin.gross_profit:,.0f}")
    summary.add_row("Profit margin", f"{fin.profit_margin:.1f}% ({fin.margin_rating})")
    summary.add_row("ROI", f"{fin.roi:.1f}% ({fin.roi_rating})")
    if record.price_per_sqm > 0:
        summary.add_row("Price per m²", f"€{record.price_per_sqm:,.0f}")
    console.print(summary)

    score_table = Table(title="Scores (/10)")
    for name in ("Financial", "Technical", "Market", "Risk", "Global"):
        score_table.add_column(name, justify="right")
    score_table.add_row(
        f"{scores.financial:g}",
        f"{scores.technical:g}",
        f"{scores.market:g}",
        f"{scores.risk:g}",
        f"[bold]{scores.global_score:g}[/bold]",
    )
    console.print(score_table)
    style = _RECOMMENDATION_STYLE[result.recommendation]
    console.print(f"[bold {style}]{result.recommendation.value}[/bold {style}]\n")

    _display_strategies(result)

    risk = result.risk
    style = _RISK_STYLE[risk.global_level]
    console.print(f"\nGlobal risk level: [bold {style}]{risk.global_level.value}[/bold {style}]")
    console.print(f"Technical risk: {risk.technical_risk:g}/10  Market risk: {risk.market_risk:g}/10")
    if not risk.factors:
        console.print("[green]No major risk identified.[/green]")
        return
    risk_table = Table(title="Risk factors")
    risk_table.add_column("Factor", style="cyan")
    risk_table.add_column("Level")
    risk_table.add_column("Impact", justify="right")
    risk_table.add_column("Description", style="dim")
    for f in risk.factors:
        risk_table.add_row(
            f.name,
            f"[{_RISK_STYLE[f.level]}]{f.level.value}[/{_RISK_STYLE[f.level]}]",
            f"{f.impact:.1f}",
            f.description,
        )
    console.print(risk_table)
    console.print("[bold]Mitigation:[/bold]")
    for m in risk.mitigations:
        console.print(f"  • {m}")


def _fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


@app.command()
def analyze(
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help="YAML or JSON property file"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    title: Optional[str] = typer.Option(None, "--title"),
    location: Optional[str] = typer.Option(None, "--location"),
    price: Optional[float] = typer.Option(None, "--price", help="Purchase price (€)"),
    surface: Optional[float] = typer.Option(None, "--surface", help="Surface (m²)"),
    notary_fees: Optional[float] = typer.Option(None, "--notary-fees"),
    renovation_costs: Optional[float] = typer.Option(None, "--renovation-costs"),
    resale_price: Optional[float] = typer.Option(None, "--resale-price"),
    time_to_sell: Optional[float] = typer.Option(None, "--time-to-sell", help="Project delay (months)"),
    structural_condition: Optional[float] = typer.Option(None, "--structural", help="Structural condition 0-10"),
    technical_condition: Optional[float] = typer.Option(None, "--technical", help="Technical condition 0-10"),
    energy_rating: Optional[str] = typer.Option(None, "--energy", help="Energy rating A-G"),
    selling_time: Optional[float] = typer.Option(None, "--selling-time", help="Average months on market"),
    market_trend: Optional[float] = typer.Option(None, "--market-trend", help="Market trend (%/year)"),
    estimate: bool = typer.Option(False, "--estimate", help="Fill missing renovation, resale and notary figures"),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Write full analysis to JSON"),
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="Write ranked strategies to CSV"),
) -> None:
    """Analyze a property: financials, scores, strategies and risks."""
    try:
        engine = _build_engine(config_path)
        record = _build_record(
            input_path,
            {
                "title": title,
                "location": location,
                "price": price,
                "surface": surface,
                "notary_fees": notary_fees,
                "renovation_costs": renovation_costs,
                "resale_price": resale_price,
                "time_to_sell": time_to_sell,
                "structural_condition": structural_condition,
                "technical_condition": technical_condition,
                "energy_rating": energy_rating,
                "selling_time": selling_time,
                "market_trend": market_trend,
            },
        )
    except (FlipDealError, FileNotFoundError) as e:
        _fail(str(e))

    if estimate:
        record = engine.with_estimates(record)
    result = engine.analyze(record)
    _display_analysis(result)

    if json_path:
        export_json(result, json_path)
        console.print(f"\n[dim]JSON: {json_path}[/dim]")
    if csv_path:
        export_csv(result, csv_path)
        console.print(f"[dim]CSV:  {csv_path}[/dim]")


@app.command()
def strategies(
    input_path: Path = typer.Argument(..., help="YAML or JSON property file"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """Show only the strategy ranking for a property file."""
    try:
        engine = _build_engine(config_path)
        record = _build_record(input_path, {})
    except (FlipDealError, FileNotFoundError) as e:
        _fail(str(e))
    _display_strategies(engine.analyze(record))


if __name__ == "__main__":
    app()
