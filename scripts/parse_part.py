from pathlib import Path
import sys
import argparse
import json

# Add src to path to allow importing the datparser package
sys.path.append(str(Path(__file__).parent.parent / "src"))

from datparser import parse, DatParserError

def main():
    parser = argparse.ArgumentParser(description="Print the header metadata of an LDraw part.")
    parser.add_argument("part", type=str, help="Path to a .dat file or a library part id (e.g. 3001)")
    parser.add_argument("--subparts", "-s", action="store_true", help="Only print referenced sub-files")
    args = parser.parse_args()

    try:
        record = parse(args.part)
    except DatParserError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.subparts:
        for part_id, count in sorted(record.subparts.items()):
            print(f"{count:4d}  {part_id}")
    else:
        print(json.dumps(record.to_dict(), indent=2))

if __name__ == "__main__":
    main()
