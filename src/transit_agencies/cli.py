"""Command line tool for inspecting agency configuration and normalization."""

import argparse
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from transit_agencies.adapters.config import AgencyConfigurationLoader, AppConfig
from transit_agencies.application.services.agency_adapter import AgencyAdapter
from transit_agencies.application.services.provider_registry import ProviderRegistry
from transit_agencies.domain.exceptions import ConfigurationError
from transit_agencies.domain.models.capability import Capability
from transit_agencies.domain.models.line import Line
from transit_agencies.domain.models.position import Position
from transit_agencies.domain.models.raw_line import RawLine
from transit_agencies.domain.models.style import Style, to_hex
from transit_agencies.domain.models.transport_mode import TransportMode

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_registry(config: AppConfig) -> ProviderRegistry:
    """Load agency configurations and build the registry.

    Raises:
        ConfigurationError: If any configuration is invalid.
    """
    registry = ProviderRegistry.from_configs(AgencyConfigurationLoader.load(config))
    registry.require(*config.get_enabled_agencies())
    return registry


def agency_summary(adapter: AgencyAdapter) -> dict[str, Any]:
    config = adapter.config
    return {
        "id": str(adapter.agency_id),
        "region": config.region,
        "timezone": config.timezone,
        "language": config.language,
        "capabilities": sorted(c.name for c in adapter.capabilities),
        "modes": sorted(m.name for m in config.default_modes),
    }


def style_summary(style: Style) -> dict[str, Any]:
    summary: dict[str, Any] = {
        "shape": style.shape.value,
        "background": to_hex(style.background_color),
        "foreground": to_hex(style.foreground_color),
    }
    if style.has_border:
        summary["border"] = to_hex(style.border_color)
    if style.background_color2:
        summary["background2"] = to_hex(style.background_color2)
    return summary


def line_summary(line: Line, style: Style) -> dict[str, Any]:
    return {
        "id": line.id,
        "network": line.network,
        "mode": line.mode.name if line.mode else None,
        "label": line.label,
        "style": style_summary(style),
    }


def position_summary(position: Position | None) -> dict[str, Any] | None:
    if position is None:
        return None
    return {"name": position.name, "direction": position.direction}


def format_style(style: Style) -> str:
    return " ".join(f"{key}={value}" for key, value in style_summary(style).items())


def _mode_arg(value: str) -> TransportMode:
    try:
        return TransportMode.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _capability_arg(value: str) -> Capability:
    try:
        return Capability.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Transit agency configuration inspector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List configured agencies
  transit-agencies agencies

  # Check whether an agency supports trip planning via a stop
  transit-agencies capabilities TFI TRIPS TRIPS_VIA

  # Normalize a raw line
  transit-agencies line TFI --name DART

  # Parse a platform descriptor
  transit-agencies position MERSEY "ne-bound"

  # Look up a line style
  transit-agencies style BAYERN 12 --mode TRAM --network swm
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    agencies_parser = subparsers.add_parser("agencies", help="List configured agencies")
    agencies_parser.add_argument("--json", action="store_true", help="Output as JSON")

    capabilities_parser = subparsers.add_parser(
        "capabilities", help="Check capabilities; exits 1 if any is unsupported"
    )
    capabilities_parser.add_argument("agency", help="Agency id, e.g. TFI")
    capabilities_parser.add_argument(
        "capabilities", nargs="+", type=_capability_arg, help="Capability names"
    )

    line_parser = subparsers.add_parser("line", help="Normalize a raw line descriptor")
    line_parser.add_argument("agency", help="Agency id, e.g. TFI")
    line_parser.add_argument("--id", dest="line_id", help="Line id")
    line_parser.add_argument("--network", help="Network")
    line_parser.add_argument("--mode-hint", type=int, help="Protocol-local numeric mode")
    line_parser.add_argument("--symbol", help="Line symbol")
    line_parser.add_argument("--name", help="Short name")
    line_parser.add_argument("--long-name", help="Long name")
    line_parser.add_argument("--train-type", help="Train type, e.g. ICE")
    line_parser.add_argument("--train-num", help="Train number")
    line_parser.add_argument("--train-name", help="Train name or branding")
    line_parser.add_argument("--json", action="store_true", help="Output as JSON")

    position_parser = subparsers.add_parser("position", help="Parse a platform descriptor")
    position_parser.add_argument("agency", help="Agency id, e.g. MERSEY")
    position_parser.add_argument("text", help="Raw position text")
    position_parser.add_argument("--json", action="store_true", help="Output as JSON")

    style_parser = subparsers.add_parser("style", help="Look up the style of a line")
    style_parser.add_argument("agency", help="Agency id, e.g. BAYERN")
    style_parser.add_argument("label", help="Line label, e.g. 12")
    style_parser.add_argument("--mode", type=_mode_arg, help="Transport mode, e.g. TRAM")
    style_parser.add_argument("--network", help="Network, e.g. swm")

    return parser


def run(args: argparse.Namespace, registry: ProviderRegistry) -> int:
    """Execute a parsed command against a registry and return the exit code."""
    if args.command == "agencies":
        summaries = [agency_summary(adapter) for adapter in registry]
        if args.json:
            print(json.dumps(summaries, indent=2, ensure_ascii=False))
        else:
            print(f"\n{len(summaries)} agenc{'y' if len(summaries) == 1 else 'ies'} configured:\n")
            for summary in summaries:
                print(f"  {summary['id']:<12} {summary['region']:<10} {summary['timezone']}")
                print(f"    {', '.join(summary['capabilities']) or '(no capabilities)'}")
        return 0

    adapter = registry.get(args.agency)

    if args.command == "capabilities":
        supported = adapter.supports(*args.capabilities)
        for capability in args.capabilities:
            state = "yes" if adapter.supports(capability) else "no"
            print(f"{capability.name}: {state}")
        return 0 if supported else 1

    if args.command == "line":
        raw = RawLine(
            id=args.line_id,
            network=args.network,
            mode_hint=args.mode_hint,
            symbol=args.symbol,
            name=args.name,
            long_name=args.long_name,
            train_type=args.train_type,
            train_num=args.train_num,
            train_name=args.train_name,
        )
        line = adapter.normalize_line(raw)
        style = adapter.style_for(line)
        if args.json:
            print(json.dumps(line_summary(line, style), indent=2, ensure_ascii=False))
        else:
            mode = line.mode.name if line.mode else "unknown mode"
            print(f"{line.label or '(no label)'} ({mode})")
            print(f"  {format_style(style)}")
        return 0

    if args.command == "position":
        position = adapter.normalize_position(args.text)
        if args.json:
            print(json.dumps(position_summary(position), indent=2, ensure_ascii=False))
        elif position is not None:
            print(f"name: {position.name!r}")
            print(f"direction: {position.direction or '-'}")
        return 0

    if args.command == "style":
        line = Line(id=None, network=args.network, mode=args.mode, label=args.label)
        print(format_style(adapter.style_for(line)))
        return 0

    return 1


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    try:
        configure_logging(config.log_level)
        registry = build_registry(config)
        return run(args, registry)
    except ConfigurationError as e:
        logger.error(f"Invalid agency configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
