# mixdesign/cli.py
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import config
from .design import MixDesignResult, design_curve_table
from .errors import InvalidStrength
from .exposure import EXPOSURE_CLASSES
from .runs import MixDesignService, MixRun


def show_exposure_options() -> List[str]:
    print("\n=== Exposure Conditions (RCC) ===")
    print(f"{'#':<2} {'Key':<11} {'Label':<18} {'Max w/c':>8} {'Min cement':>11} {'Min fck':>8}")
    keys = []
    for i, (k, e) in enumerate(EXPOSURE_CLASSES.items(), start=1):
        print(
            f"{i:<2} {k:<11} {e.label:<18} {e.max_water_cement_ratio:>8.2f}"
            f" {e.min_cement_content:>11.0f} {e.min_grade_fck:>8.0f}"
        )
        keys.append(k)
    return keys


def choose_exposure(default_key="moderate") -> str:
    options = show_exposure_options()
    default_idx = options.index(default_key) + 1 if default_key in options else 1
    s = input(f"\nChoose exposure (1-{len(options)} or key) [{default_idx}]: ").strip()
    if not s:
        return options[default_idx - 1]
    if s.isdigit():
        i = int(s)
        if 1 <= i <= len(options):
            return options[i - 1]
        raise ValueError("Invalid number.")
    if s in options:
        return s
    raise ValueError(f"Please enter 1–{len(options)} or one of: {', '.join(options)}")


def ask_float(prompt, default=None):
    s = input(f"{prompt}" + (f" [{default}]" if default is not None else "") + ": ").strip()
    if not s and default is not None:
        return float(default)
    return float(s)


def ask_text(prompt, default=""):
    s = input(f"{prompt}" + (f" [{default}]" if default else "") + ": ").strip()
    return s or default


def render_result_table(result: MixDesignResult) -> None:
    rows = [
        ("Target mean strength", "MPa", f"{result.target_mean_strength:.2f}"),
        ("Water-cement ratio", "-", f"{result.water_cement_ratio:.3f}"),
        ("Water", "kg/m³", f"{result.water_content:.2f}"),
        ("Cement", "kg/m³", f"{result.cement_content:.2f}"),
        ("Fine aggregate", "kg/m³", f"{result.fine_aggregate:.2f}"),
        ("Coarse aggregate", "kg/m³", f"{result.coarse_aggregate:.2f}"),
    ]
    W_NAME, W_UNIT, W_VAL = 22, 8, 10
    print("\n=== Mix Design Results ===")
    print(f"{'Quantity':<{W_NAME}}{'Unit':>{W_UNIT}}{'Value':>{W_VAL}}")
    for name, unit, val in rows:
        print(f"{name:<{W_NAME}}{unit:>{W_UNIT}}{val:>{W_VAL}}")


def render_checks(result: MixDesignResult, fck: float) -> None:
    c = result.checks
    e = c.exposure

    def mark(ok):
        return "OK" if ok else "NOT OK"

    print(f"\nDurability checks ({e.label}):")
    print(f"  w/c  {result.water_cement_ratio:.3f} <= {e.max_water_cement_ratio:.2f}  {mark(c.water_cement_ratio_ok)}")
    print(f"  cement {result.cement_content:.1f} >= {e.min_cement_content:.0f} kg/m³  {mark(c.cement_content_ok)}")
    print(f"  grade  fck {fck:g} >= {e.min_grade_fck:.0f} MPa  {mark(c.grade_ok)}")


def render_design_curve(fck: float, exposure: str, span: float = 10.0, n_points: int = 5) -> None:
    # a fixed ±span vanishes in float precision for very large fck
    span = max(span, abs(fck) * 0.1)
    lo = max(1.0, fck - span)
    df = design_curve_table(lo, fck + span, n_points, exposure)
    print("\nDesign curve (unrounded):")
    print(f"{'fck':>6} {'fck,m':>8} {'w/c':>7} {'Cement':>9} {'Water':>8}")
    for _, r in df.iterrows():
        print(
            f"{r['fck']:>6.1f} {r['target_mean_strength']:>8.2f} {r['water_cement_ratio']:>7.3f}"
            f" {r['cement_content']:>9.1f} {r['water_content']:>8.1f}"
        )


def run_design(service: Optional[MixDesignService] = None) -> MixRun:
    service = service or MixDesignService()
    print("\n=== Mix Design: fck + exposure ===")
    fck = ask_float("Characteristic strength fck (MPa)", 25)
    exposure = choose_exposure(default_key="moderate")
    cement_grade = ask_text("Cement grade (e.g. OPC 53)")
    project_name = ask_text("Project name")
    project_site = ask_text("Project site")
    mix_id = ask_text("Mix ID (blank = auto)")

    run = service.create_run(
        fck,
        cement_grade=cement_grade,
        exposure=exposure,
        project_name=project_name,
        project_site=project_site,
        mix_id=mix_id,
    )
    print(f"\nRun #{run.id}  {run.project.mix_id}  ({run.timestamp})")
    render_result_table(run.result)
    render_checks(run.result, run.input.fck)
    render_design_curve(run.input.fck, run.input.exposure)
    return run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mixdesign", description="Concrete mix design from fck and exposure.")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("design", help="interactive mix design")
    sub.add_parser("exposures", help="list exposure conditions")
    serve = sub.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default=config.HOST)
    serve.add_argument("--port", type=int, default=config.PORT)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    command = args.command or "design"

    if command == "exposures":
        show_exposure_options()
        return 0

    if command == "serve":
        from .api import run  # web stack only when serving
        run(host=args.host, port=args.port)
        return 0

    config.configure_logging()
    try:
        run_design()
    except InvalidStrength as e:
        print(f"\nError: {e.message}")
        return 2
    except ValueError as e:
        print(f"\nError: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
