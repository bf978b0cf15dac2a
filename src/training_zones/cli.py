#!/usr/bin/env python3
"""
Training Zones CLI.

Heart rate zones, cycling power zones, and running training paces from
physiological inputs.

Usage:
    training-zones hr --resting-hr 49 --max-hr 188
    training-zones power --ftp 220
    training-zones paces --best-5k 21:30 --units imperial
    training-zones vo2max --cooper-distance 2800
    training-zones summary --age 45 --vo2max 50 --ftp 250
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .calculator import BEST_EFFORT_DISTANCE_M, ZoneCalculator
from .config import UnitSystem, get_settings
from .exceptions import TrainingZonesError
from .formatting import (
    NOT_CALCULATED,
    NOT_SET,
    format_duration,
    format_speed_as_pace,
    heart_rate_zone_bars,
    parse_duration,
    power_zone_bars,
)
from .metrics.vo2max import (
    estimate_vo2max_from_cooper_test,
    estimate_vo2max_from_heart_rate_reserve,
    estimate_vo2max_from_race,
)
from .models import PhysiologicalInputs

console = Console()
logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records through rich, at the configured level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_inputs(args) -> PhysiologicalInputs:
    """Collect physiological inputs from parsed arguments."""
    return PhysiologicalInputs(
        resting_hr=args.resting_hr,
        max_hr=args.max_hr,
        age_years=args.age,
        vo2max=args.vo2max,
        ftp=args.ftp,
        best_5k_duration_sec=args.best_5k,
        best_12min_distance_m=args.cooper_distance,
    )


def _value_or_placeholder(value: Optional[float], unit: str, placeholder: str = NOT_SET) -> str:
    if value is None:
        return placeholder
    return f"{value:g} {unit}"


def print_inputs(inputs: PhysiologicalInputs) -> None:
    table = Table(title="Inputs", box=box.ROUNDED)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Age", _value_or_placeholder(inputs.age_years, "years"))
    table.add_row("Resting Heart Rate", _value_or_placeholder(inputs.resting_hr, "bpm"))
    table.add_row("Maximum Heart Rate", _value_or_placeholder(inputs.max_hr, "bpm", NOT_CALCULATED))
    table.add_row("VO2 Max", _value_or_placeholder(inputs.vo2max, "ml/kg/min"))
    table.add_row("Functional Threshold Power", _value_or_placeholder(inputs.ftp, "watts"))
    best_5k = format_duration(inputs.best_5k_duration_sec) if inputs.best_5k_duration_sec else NOT_SET
    table.add_row("Best Recent 5K", best_5k)
    table.add_row("Best 12 Minute Effort", _value_or_placeholder(inputs.best_12min_distance_m, "m"))

    console.print(table)
    console.print()


def print_hr_zones(calc: ZoneCalculator) -> None:
    zone_set = calc.heart_rate_zones()
    if zone_set is None:
        console.print(
            "[yellow]Heart rate zones are not available because your maximum heart rate "
            "is not known and age has not been set.[/yellow]"
        )
        console.print()
        return

    table = Table(title="Heart Rate Zones", box=box.ROUNDED)
    table.add_column("Zone", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Up To", style="red", justify="right")

    for i, bar in enumerate(heart_rate_zone_bars(zone_set), 1):
        table.add_row(str(i), bar.description, f"{bar.label} bpm")

    console.print(table)
    console.print(f"Calculated using [bold]{zone_set.method.value}[/bold]")
    console.print()


def print_power_zones(calc: ZoneCalculator) -> None:
    zone_set = calc.power_zones()
    if zone_set is None:
        console.print(
            "[yellow]Cycling power zones were not calculated because your FTP has not been set.[/yellow]"
        )
        console.print()
        return

    table = Table(title=f"Cycling Power Zones (FTP {zone_set.ftp:g} W)", box=box.ROUNDED)
    table.add_column("Zone", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Boundary", style="blue", justify="right")

    bars = power_zone_bars(zone_set)
    for i, bar in enumerate(bars, 1):
        boundary = f"{bar.label} W" if i < len(bars) else f"{bar.label}+ W"
        table.add_row(str(i), bar.description, boundary)

    console.print(table)
    console.print("Computed from FTP using the Andy Coggan formula; zone 6 is open-ended.")
    console.print()


def print_paces(calc: ZoneCalculator, units: UnitSystem) -> None:
    pace_table = calc.training_paces()
    if not pace_table.is_available:
        console.print(
            "[yellow]To calculate run paces a 12 minute effort, a hard run of at least 5 km, "
            "resting and maximum heart rate, or VO2 Max must be known.[/yellow]"
        )
        console.print()
        return

    table = Table(title="Run Training Paces", box=box.ROUNDED)
    table.add_column("Pace", style="cyan")
    table.add_column("Target", style="green", justify="right")

    for pace_type, speed in pace_table.paces.items():
        table.add_row(pace_type.display_name, format_speed_as_pace(speed, units))

    console.print(table)
    console.print(
        f"Calculated using [bold]{pace_table.method.value}[/bold] "
        f"(VO2 Max {pace_table.vo2max:.1f} ml/kg/min)"
    )
    console.print()


def print_vo2max_estimates(inputs: PhysiologicalInputs) -> None:
    table = Table(title="VO2 Max Estimates", box=box.ROUNDED)
    table.add_column("Method", style="cyan")
    table.add_column("VO2 Max (ml/kg/min)", style="white", justify="right")

    rows = 0
    if inputs.has_cooper_test:
        vo2max = estimate_vo2max_from_cooper_test(inputs.best_12min_distance_m)
        table.add_row("Cooper Test", f"{vo2max:.1f}")
        rows += 1
    if inputs.has_best_5k:
        vo2max = estimate_vo2max_from_race(BEST_EFFORT_DISTANCE_M, inputs.best_5k_duration_sec)
        table.add_row("Best Recent 5K", f"{vo2max:.1f}")
        rows += 1
    if inputs.has_resting_hr and inputs.has_max_hr:
        vo2max = estimate_vo2max_from_heart_rate_reserve(inputs.max_hr, inputs.resting_hr)
        table.add_row("Heart Rate", f"{vo2max:.1f}")
        rows += 1
    if inputs.has_vo2max:
        table.add_row("Measured", f"{inputs.vo2max:.1f}")
        rows += 1

    if rows == 0:
        console.print(f"[yellow]VO2 Max: {NOT_CALCULATED}[/yellow]")
    else:
        console.print(table)
    console.print()


def cmd_hr(args, calc: ZoneCalculator, units: UnitSystem):
    """Show heart rate zones."""
    print_hr_zones(calc)


def cmd_power(args, calc: ZoneCalculator, units: UnitSystem):
    """Show cycling power zones."""
    print_power_zones(calc)


def cmd_paces(args, calc: ZoneCalculator, units: UnitSystem):
    """Show running training paces."""
    print_paces(calc, units)


def cmd_vo2max(args, calc: ZoneCalculator, units: UnitSystem):
    """Show VO2max estimates from every available input."""
    print_vo2max_estimates(calc.inputs)


def cmd_summary(args, calc: ZoneCalculator, units: UnitSystem):
    """Show inputs and every result that can be calculated."""
    console.print(Panel("[bold]Training Zones[/bold]"))
    console.print()
    print_inputs(calc.inputs)
    print_hr_zones(calc)
    print_power_zones(calc)
    print_paces(calc, units)


COMMANDS = {
    "hr": cmd_hr,
    "power": cmd_power,
    "paces": cmd_paces,
    "vo2max": cmd_vo2max,
    "summary": cmd_summary,
}


def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Physiological input options shared by every command."""
    parser.add_argument("--resting-hr", type=float, help="Resting heart rate (bpm)")
    parser.add_argument("--max-hr", type=float, help="Maximum heart rate (bpm)")
    parser.add_argument("--age", type=float, help="Age in years")
    parser.add_argument("--vo2max", type=float, help="VO2 Max (ml/kg/min)")
    parser.add_argument("--ftp", type=float, help="Functional Threshold Power (watts)")
    parser.add_argument(
        "--best-5k",
        type=parse_duration,
        help="Best recent 5K (or longer) effort duration, e.g. 21:30",
    )
    parser.add_argument(
        "--cooper-distance",
        type=float,
        help="Distance covered in a 12 minute effort (meters)",
    )
    parser.add_argument(
        "--units",
        choices=[u.value for u in UnitSystem],
        help="Unit system for paces (default from settings)",
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="training-zones",
        description="Training Zones - heart rate, power, and pace zones",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  training-zones hr --resting-hr 49 --max-hr 188
  training-zones power --ftp 220
  training-zones paces --best-5k 21:30 --units imperial
  training-zones vo2max --cooper-distance 2800
  training-zones summary --age 45 --vo2max 50 --ftp 250
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    hr_p = subparsers.add_parser("hr", help="Show heart rate zones")
    add_input_arguments(hr_p)

    power_p = subparsers.add_parser("power", help="Show cycling power zones")
    add_input_arguments(power_p)

    paces_p = subparsers.add_parser("paces", help="Show running training paces")
    add_input_arguments(paces_p)

    vo2max_p = subparsers.add_parser("vo2max", help="Show VO2 Max estimates")
    add_input_arguments(vo2max_p)

    summary_p = subparsers.add_parser("summary", help="Show everything that can be calculated")
    add_input_arguments(summary_p)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        parser.print_help()
        return 0

    settings = get_settings()
    configure_logging(settings.log_level)
    units = UnitSystem(args.units) if args.units else settings.units

    try:
        inputs = build_inputs(args)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"[red]Invalid {field}: {error['msg']}[/red]")
        return 1

    try:
        COMMANDS[args.command](args, ZoneCalculator(inputs), units)
    except TrainingZonesError as e:
        logger.debug("Calculation failed: %r", e)
        console.print(f"[red]Error: {e.message}[/red]")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
