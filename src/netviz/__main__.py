import argparse
import sys
from pathlib import Path

from .capture import iter_network_payloads
from .core.config import settings
from .exceptions import NetvizError
from .histogram import AddressHistogram
from .utils import export_to_csv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Address histogram utility")
    sub = parser.add_subparsers(dest="cmd", required=True)
    hist_cmd = sub.add_parser("histogram", help="top-N addresses of a capture")
    hist_cmd.add_argument("capture")
    hist_cmd.add_argument(
        "--relationship",
        default=settings.relationship.value,
        help="src, dst or both",
    )
    hist_cmd.add_argument("--bars", type=int, default=settings.max_bars, help="number of bars")
    hist_cmd.add_argument("--title", default=settings.title)
    hist_cmd.add_argument("--subtitle", default=settings.subtitle)
    hist_cmd.add_argument("--max-packets", type=int, default=None)
    hist_cmd.add_argument("--chart", dest="chart_path", help="write a PNG bar chart here")
    hist_cmd.add_argument("--csv", dest="csv_path", help="write the top-N table here")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.cmd == "histogram":
        try:
            histogram = AddressHistogram(args.relationship, max_bars=args.bars)
            histogram.quick_config(args.relationship, args.title, args.subtitle)
            histogram.ingest(iter_network_payloads(Path(args.capture), args.max_packets))
            result = histogram.top_n()
            df = result.as_dataframe()
            print(df.to_string(index=False))
            print(f"Total count: {result.total_count}")
            if args.csv_path:
                export_to_csv(df, args.csv_path)
            if args.chart_path:
                histogram.render(args.chart_path)
        except NetvizError as exc:
            print(f"error: {exc}", file=sys.stderr)
            if exc.suggestion:
                print(f"hint: {exc.suggestion}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
