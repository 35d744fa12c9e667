"""
Minimal CLI for backend computations (no GUI).

Usage examples:
  python -m calcgas.cli compute --input lecturas.json
  python -m calcgas.cli compute --input planilla.txt --preset "Gas seco" --output out.csv
  python -m calcgas.cli compare --a antes.json --b despues.json

Commands:
  - compute: computes all outputs from a JSON inputs file or a TXT field sheet
  - presets: lists the gas chromatography presets
  - compare: computes two input sets and reports per-field deltas
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional, Tuple
import csv
import os

from . import api
from . import io
from . import presets as P


def _read_inputs(path: str) -> Tuple[Dict[str, Any], Optional[str]]:
    ext = os.path.splitext(path)[1].lower()
    try:
        with open(path, "r", encoding="utf-8") as f:
            if ext == ".txt":
                return io.parse_field_report(f.read())
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Cannot read {path}: {e}")
    if not isinstance(data, dict):
        raise SystemExit(f"{path}: expected a JSON object of inputs")
    preset = data.pop("preset", None)
    return data, preset


def _write_output(obj: Any, path: str | None) -> None:
    if not path:
        json.dump(obj, sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return
    ext = os.path.splitext(path)[1].lower()
    if ext == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(obj, f, ensure_ascii=False)
    elif ext == ".csv":
        if isinstance(obj, dict) and all(not isinstance(v, (list, dict)) for v in obj.values()):
            with open(path, "w", newline="", encoding="utf-8") as f:
                w = csv.writer(f)
                w.writerow(list(obj.keys()))
                w.writerow([obj[k] for k in obj.keys()])
        elif isinstance(obj, dict) and isinstance(obj.get("fields"), dict):
            # compare result: one row per output field
            with open(path, "w", newline="", encoding="utf-8") as f:
                w = csv.writer(f)
                w.writerow(["field", "A", "B", "delta", "pct"])
                for name, row in obj["fields"].items():
                    w.writerow([name, row["A"], row["B"], row["delta"], "" if row["pct"] is None else row["pct"]])
        else:
            raise SystemExit("CSV output needs a flat dict or a compare result")
    else:
        raise SystemExit(f"Unsupported output extension: {ext} (use .json or .csv)")


def _inputs_with_preset(path: str, preset_arg: Optional[str]) -> Dict[str, Any]:
    data, preset_file = _read_inputs(path)
    values = P.with_defaults(data)
    preset = preset_arg or preset_file
    if preset:
        try:
            values = P.apply_preset(values, preset)
        except P.UnknownPresetError as e:
            raise SystemExit(e.args[0])
    return values


def cmd_compute(args: argparse.Namespace) -> int:
    values = _inputs_with_preset(args.input, args.preset)
    out = api.compute(values)
    _write_output(out, args.output)
    return 0


def cmd_presets(args: argparse.Namespace) -> int:
    _write_output(P.PRESETS, args.output)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    data_a = _inputs_with_preset(args.a, args.preset_a)
    data_b = _inputs_with_preset(args.b, args.preset_b)
    out = api.compare(data_a, data_b)
    if args.changed_only:
        out["fields"] = {k: v for k, v in out["fields"].items() if k in out["changed"]}
    _write_output(out, args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="calcgas.cli", description="Orifice meter gas flow calculator (no GUI)")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    p_comp = sub.add_parser("compute", help="Compute outputs from a JSON inputs file or TXT field sheet")
    p_comp.add_argument("--input", required=True, help="Path to .json or .txt input file")
    p_comp.add_argument("--preset", required=False, help="Gas preset applied over the inputs")
    p_comp.add_argument("--output", required=False, help="Output file (.json or .csv)")
    p_comp.set_defaults(func=cmd_compute)

    p_pre = sub.add_parser("presets", help="List gas presets")
    p_pre.add_argument("--output", required=False, help="Output file (.json)")
    p_pre.set_defaults(func=cmd_presets)

    p_cmp = sub.add_parser("compare", help="Compare outputs of two input sets")
    p_cmp.add_argument("--a", required=True, help="Path to input file for A")
    p_cmp.add_argument("--b", required=True, help="Path to input file for B")
    p_cmp.add_argument("--preset-a", required=False, help="Gas preset applied over A")
    p_cmp.add_argument("--preset-b", required=False, help="Gas preset applied over B")
    p_cmp.add_argument("--changed-only", action="store_true", help="Only report fields that differ")
    p_cmp.add_argument("--output", required=False, help="Output file (.json or .csv)")
    p_cmp.set_defaults(func=cmd_compare)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
