"""
Run the solar sizing model from the command line.
Sizes the system for the JSON inputs and writes the Excel report.
"""

import argparse

from solar_sizing.runner import run_model


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Size a rooftop solar system from monthly consumption."
    )
    parser.add_argument(
        "--inputs", "-i",
        default="example_inputs.json",
        help="Path to inputs JSON (default: example_inputs.json)",
    )
    parser.add_argument(
        "--output", "-o",
        default="SolarSizing.xlsx",
        help="Path for output Excel file (default: SolarSizing.xlsx)",
    )
    args = parser.parse_args(argv)

    run_model(args.inputs, args.output)

    print()
    print("NEXT STEPS:")
    print(f"  1. Open {args.output}")
    print("  2. Review the 'Summary' tab")
    print("  3. See 'Charts' for the savings projection")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
