"""
Command line front end for the sound conversion engine

Examples:
    hvac-sound convert --octave-bands 60,52,45,40,36,34,33,32
    hvac-sound convert --nc 35 --json
    hvac-sound curves
    hvac-sound curves --rating 32
"""

from __future__ import annotations

import argparse
import json
from typing import List, Sequence

from .formatting import format_sound_value, get_nc_description
from .measurement import DBAInput, NCInput, OctaveBandInput, SonesInput, SoundInput
from .measurement_aggregator import MeasurementAggregator
from .nc_curves import NC_CURVE_TABLE
from .octave_bands import OctaveBandData
from .scale_guard import default_guard
from .settings import get_settings


def _parse_levels(arg: str) -> List[float]:
    """Parse comma-separated octave band levels (63 Hz first)"""
    parts = [p.strip() for p in arg.split(",")]
    levels = [float(p) for p in parts if p]
    if not levels:
        raise ValueError("No valid octave band levels parsed")
    return levels


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hvac-sound",
        description="Convert HVAC noise between sones, NC, dBA and octave bands.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser(
        "convert",
        help="Derive every representation from one input",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    source = convert.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--octave-bands",
        type=str,
        help="Comma-separated levels (dB) for 63,125,250,500,1000,2000,4000,8000 Hz",
    )
    source.add_argument("--nc", type=float, help="NC rating")
    source.add_argument("--dba", type=float, help="A-weighted sound level (dBA)")
    source.add_argument("--sones", type=float, help="Loudness (sones)")
    convert.add_argument("--json", action="store_true", help="Print JSON instead of text")

    curves = subparsers.add_parser(
        "curves",
        help="Show the standard NC curves or one interpolated curve",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    curves.add_argument("--rating", type=float, help="NC rating to interpolate (clamped to 15-70)")
    curves.add_argument("--json", action="store_true", help="Print JSON instead of text")

    return parser


def _build_input(args: argparse.Namespace) -> SoundInput:
    if args.octave_bands is not None:
        return OctaveBandInput(OctaveBandData.from_list(_parse_levels(args.octave_bands)))
    if args.nc is not None:
        return NCInput(args.nc)
    if args.dba is not None:
        return DBAInput(args.dba)
    return SonesInput(args.sones)


def _run_convert(args: argparse.Namespace) -> int:
    precision = get_settings().display_precision
    sound_input = _build_input(args)
    measurement = MeasurementAggregator().aggregate(sound_input)

    scale_check = None
    if isinstance(sound_input, OctaveBandInput):
        scale_check = default_guard.check(sound_input.octave_bands)

    if args.json:
        payload = measurement.to_dict()
        if scale_check is not None:
            payload['scale_check'] = {
                'exceeds_nc70': scale_check.exceeds,
                'max_excess': scale_check.max_excess,
                'message': scale_check.message,
            }
        print(json.dumps(payload, indent=2))
        return 0

    for unit, value in (("nc", measurement.nc), ("dba", measurement.dba), ("sones", measurement.sones)):
        level = measurement.confidence.get(unit)
        shown = format_sound_value(value, unit, 2 if unit == "sones" else precision)
        print(f"{unit.upper():>6}: {shown} ({level.value if level else 'n/a'})")
    print(f"        {get_nc_description(measurement.nc)}")

    if measurement.octave_bands is not None:
        label = "representative NC curve" if measurement.synthetic_octave_bands else "input"
        print(f"Octave bands ({label}):")
        print("  " + ", ".join(
            f"{freq}: {value:g}" for freq, value in measurement.octave_bands.items()
        ))
    for note in measurement.notes:
        print(f"Note: {note}")
    if scale_check is not None and scale_check.exceeds:
        print(f"Warning: {scale_check.message}")
    return 0


def _run_curves(args: argparse.Namespace) -> int:
    if args.rating is None:
        frame = NC_CURVE_TABLE.to_dataframe()
        if args.json:
            print(json.dumps({str(curve.rating): curve.values.to_dict() for curve in NC_CURVE_TABLE}, indent=2))
        else:
            print(frame.to_string())
        return 0

    spectrum = NC_CURVE_TABLE.interpolate(args.rating)
    if args.json:
        print(json.dumps({'rating': args.rating, 'octave_bands': spectrum.to_dict()}, indent=2))
    else:
        print(f"NC-{args.rating:g}")
        print("Frequency (Hz), Level (dB)")
        for freq, level in spectrum.items():
            print(f"{freq}, {level:g}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "convert":
            return _run_convert(args)
        return _run_curves(args)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
