"""
Command line interface for fasttag.

    fasttag tag "The dog ran quickly" --lexicon lexicon.txt
    echo "The dog ran quickly" | fasttag tag --format slash
    fasttag interactive
    fasttag lookup dog Dog
    fasttag tags
    fasttag config --set-lexicon lexicon.txt
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, Optional, TextIO

from tabulate import tabulate

from . import __version__
from .config import FastTagConfig
from .lexicon import LexiconLoadError
from .output import OUTPUTS, format_sentence
from .storage import (
    get_config_file,
    get_default_lexicon,
    load_config,
    read_config,
    set_default_lexicon,
    set_default_output_format,
)
from .tagger import FastTagger
from .tagset import TAG_DESCRIPTIONS

EXIT_COMMAND = "[x]"

TASK_CHOICES = ("tag", "interactive", "lookup", "tags", "config")

FORMAT_CHOICES = sorted({name for entry in OUTPUTS for name in (entry.name, *entry.aliases)})


def _add_lexicon_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--lexicon",
        "-l",
        help="Lexicon file or http(s) URL (default: $FASTTAG_LEXICON or the configured lexicon)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fasttag",
        description="fasttag: lexicon and rule based part-of-speech tagger",
    )
    parser.add_argument("--version", "-V", action="version", version=f"fasttag {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="task", required=False)

    format_help = "; ".join(f"{entry.name}: {entry.description}" for entry in OUTPUTS)

    tag_parser = subparsers.add_parser("tag", help="Tag sentences given as arguments or on stdin")
    tag_parser.add_argument("text", nargs="*", help="Sentences to tag (default: read stdin, one per line)")
    _add_lexicon_argument(tag_parser)
    tag_parser.add_argument("--format", "-f", choices=FORMAT_CHOICES, help=f"Output format ({format_help})")
    tag_parser.add_argument(
        "--no-clean",
        dest="clean_words",
        action="store_false",
        default=None,
        help="Look up tokens as-is, without stripping surrounding punctuation",
    )

    interactive_parser = subparsers.add_parser(
        "interactive",
        help=f"Tag sentences typed on the console until {EXIT_COMMAND} is entered",
    )
    _add_lexicon_argument(interactive_parser)

    lookup_parser = subparsers.add_parser("lookup", help="Show the lexicon tags of words")
    lookup_parser.add_argument("words", nargs="+", help="Words to look up")
    _add_lexicon_argument(lookup_parser)

    subparsers.add_parser("tags", help="List the tagset with descriptions")

    config_parser = subparsers.add_parser("config", help="Configure fasttag settings")
    config_parser.add_argument("--show", action="store_true", help="Show current configuration")
    config_parser.add_argument("--set-lexicon", metavar="SOURCE", help="Set the default lexicon file or URL")
    config_parser.add_argument(
        "--set-output-format",
        metavar="FORMAT",
        choices=[entry.name for entry in OUTPUTS],
        help="Set the default output format",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_tagger(args: argparse.Namespace) -> Optional[FastTagger]:
    source = args.lexicon or get_default_lexicon()
    if not source:
        print(
            "[fasttag] Error: No lexicon given. Use --lexicon, set FASTTAG_LEXICON "
            "or run 'fasttag config --set-lexicon PATH'.",
            file=sys.stderr,
        )
        return None
    try:
        return FastTagger.from_source(source)
    except (FileNotFoundError, LexiconLoadError) as exc:
        print(f"[fasttag] Error: {exc}", file=sys.stderr)
        return None
    except UnicodeDecodeError as exc:
        print(f"[fasttag] Error: Lexicon {source} is not valid UTF-8: {exc}", file=sys.stderr)
        return None


def _read_sentences(stream: TextIO) -> Iterable[str]:
    for line in stream:
        yield line.rstrip("\r\n")


def run_tag(args: argparse.Namespace, config: FastTagConfig) -> int:
    tagger = _load_tagger(args)
    if tagger is None:
        return 1
    output_format = args.format or config.output_format
    clean_words = config.clean_words if args.clean_words is None else args.clean_words

    if args.text:
        sentences: Iterable[str] = args.text
    else:
        if sys.stdin.isatty():
            print("[fasttag] Error: No text given and stdin is a terminal", file=sys.stderr)
            return 1
        sentences = _read_sentences(sys.stdin)

    for sentence in sentences:
        tokens = sentence.split(" ") if sentence else []
        tagged = tagger.tag_tokens(tokens, clean_words=clean_words)
        rendered = format_sentence(tagged, output_format)
        if rendered:
            print(rendered)
    return 0


def run_interactive(tagger: FastTagger, stdin: TextIO, stdout: TextIO) -> int:
    """Console loop: tag each line until the exit command or end of input."""
    print("Welcome to fasttag", file=stdout)
    print("Enter an English sentence and watch it being tagged!", file=stdout)
    print(f"Type {EXIT_COMMAND} to quit.", file=stdout)
    stdout.flush()

    for sentence in _read_sentences(stdin):
        if sentence == EXIT_COMMAND:
            break
        for tagged in tagger.tag_sentence(sentence):
            print(tagged, file=stdout)
        stdout.flush()

    print("Bye Bye!", file=stdout)
    return 0


def run_lookup(args: argparse.Namespace) -> int:
    tagger = _load_tagger(args)
    if tagger is None:
        return 1
    missing = 0
    for word in args.words:
        candidates = tagger.lexicon.lookup(word)
        if candidates is None:
            missing += 1
            print(f"{word}\t(unknown)")
        elif not candidates:
            print(f"{word}\t(no tags)")
        else:
            print(f"{word}\t{' '.join(candidates)}")
    return 1 if missing else 0


def run_tags() -> int:
    rows = sorted(TAG_DESCRIPTIONS.items())
    print(tabulate(rows, headers=["Tag", "Description"]))
    return 0


def run_config(args: argparse.Namespace) -> int:
    """Run config command to manage fasttag configuration."""
    changed = False
    if args.set_lexicon:
        set_default_lexicon(args.set_lexicon)
        print(f"[fasttag] Default lexicon set to: {read_config().get('lexicon')}")
        changed = True
    if args.set_output_format:
        set_default_output_format(args.set_output_format)
        print(f"[fasttag] Default output format set to: {args.set_output_format}")
        changed = True
    if changed:
        print(f"[fasttag] Configuration saved to: {get_config_file()}")
        if not args.show:
            return 0

    print(f"Config file: {get_config_file(create_dir=False)}")
    print(json.dumps(read_config(), indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    else:
        argv = list(argv)

    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config()
    _configure_logging(args.verbose or config.verbose)

    if not args.task:
        parser.error("No task specified. Use one of: " + ", ".join(TASK_CHOICES))

    if args.task == "tag":
        return run_tag(args, config)
    if args.task == "interactive":
        tagger = _load_tagger(args)
        if tagger is None:
            return 1
        return run_interactive(tagger, sys.stdin, sys.stdout)
    if args.task == "lookup":
        return run_lookup(args)
    if args.task == "tags":
        return run_tags()
    if args.task == "config":
        return run_config(args)

    parser.error(f"Unknown task '{args.task}'. Supported tasks: {', '.join(TASK_CHOICES)}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
