"""Transliteration CLI entry point."""

import argparse
from pathlib import Path

from rich.markup import escape
from rich.table import Table
from rich.text import Text
from tqdm import tqdm

from baybayin.config import BaybayinConfig, load_config
from baybayin.exceptions import BaybayinError
from baybayin.pipeline import BaybayinTranscriber, TransliterationResult
from baybayin.utils import console, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Transliterate Latin-script Tagalog into Baybayin",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--text",
        type=str,
        default=None,
        help="Text to transliterate",
    )
    parser.add_argument(
        "--text-file",
        type=Path,
        default=None,
        help="File containing text to transliterate (one line per entry)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write results to this file instead of the console",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON configuration file",
    )
    parser.add_argument(
        "--preset",
        choices=["traditional", "modern"],
        default=None,
        help="Configuration preset (ignored when --config is given)",
    )
    parser.add_argument(
        "--coda-mark",
        choices=["none", "virama", "pamudpod"],
        default=None,
        help="Mark appended to syllable-final consonants",
    )
    parser.add_argument(
        "--no-expand-particles",
        action="store_true",
        help='Keep standalone "ng" and "mga" as written',
    )
    parser.add_argument(
        "--side-by-side",
        action="store_true",
        help="Show original and Baybayin text in a table",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (defaults to the configured level)",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> BaybayinConfig:
    """Merge the config file or preset with command-line overrides."""
    if args.config is not None:
        config = load_config(args.config)
    elif args.preset is not None:
        config = BaybayinConfig.from_preset(args.preset)
    else:
        config = BaybayinConfig()

    updates: dict = {}
    if args.coda_mark is not None:
        updates["coda_mark"] = args.coda_mark
    if args.no_expand_particles:
        updates["expand_particles"] = False
    if args.log_level is not None:
        updates["log_level"] = args.log_level

    return config.model_copy(update=updates)


def render(results: list[TransliterationResult], side_by_side: bool) -> None:
    if side_by_side:
        table = Table(title="Baybayin")
        table.add_column("Tagalog")
        table.add_column("Baybayin")
        for result in results:
            table.add_row(Text(result.original), Text(result.baybayin))
        console.print(table)
    else:
        for result in results:
            console.print(result.baybayin, markup=False, highlight=False)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for transliteration CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate input
    if args.text is None and args.text_file is None:
        console.print("[red]Error:[/red] Either --text or --text-file is required")
        return 1

    try:
        config = resolve_config(args)
        logger = setup_logger("baybayin", level=config.log_level)
        transcriber = BaybayinTranscriber(config)

        if args.text is not None:
            results = [transcriber.transcribe_pair(args.text)]
        else:
            if not args.text_file.exists():
                console.print(f"[red]Error:[/red] Text file not found: {escape(str(args.text_file))}")
                return 1

            with open(args.text_file, encoding="utf-8") as f:
                lines = [line.rstrip("\n") for line in f]

            logger.info(f"Transliterating {len(lines)} lines from {args.text_file}")
            results = list(
                transcriber.transcribe_lines(tqdm(lines, disable=args.output is None))
            )

        if args.output is not None:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            with open(args.output, "w", encoding="utf-8") as f:
                for result in results:
                    f.write(result.baybayin + "\n")
            console.print(f"[green]Saved:[/green] {escape(str(args.output))} ({len(results)} lines)")
        else:
            render(results, args.side_by_side)

    except BaybayinError as e:
        console.print(f"[red]Transliteration failed:[/red] {escape(str(e))}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
