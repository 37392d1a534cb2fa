"""CLI entrypoint for spellphonics — subcommand dispatcher."""

import argparse
import json
import logging
import sys


def _add_shared_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared by every subcommand."""
    parser.add_argument("--json", action="store_true", default=False,
                        help="Print machine-readable JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Log affix and pronunciation decisions (debug level)")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments with subcommands."""
    parser = argparse.ArgumentParser(
        prog="spellphonics",
        description="Phonics breakdown of English words for spelling practice",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    breakdown_parser = subparsers.add_parser(
        "breakdown",
        help="Syllables, sounds, blends and pattern for each word",
    )
    breakdown_parser.add_argument("words", nargs="+", help="Words to analyse")
    _add_shared_args(breakdown_parser)

    syllables_parser = subparsers.add_parser(
        "syllables",
        help="Syllables only, with their speech-safe spellings",
    )
    syllables_parser.add_argument("words", nargs="+", help="Words to split")
    _add_shared_args(syllables_parser)

    guide_parser = subparsers.add_parser(
        "guide",
        help="Sound-by-sound pronunciation guide",
    )
    guide_parser.add_argument("word", help="Word to guide")
    _add_shared_args(guide_parser)

    hint_parser = subparsers.add_parser(
        "hint",
        help="Syllable hint for one letter position (0-based)",
    )
    hint_parser.add_argument("word", help="Word being spelled")
    hint_parser.add_argument("index", type=int, help="Letter index, starting at 0")
    _add_shared_args(hint_parser)

    pronounce_parser = subparsers.add_parser(
        "pronounce",
        help="Speech-safe spelling for syllables",
    )
    pronounce_parser.add_argument("syllables", nargs="+", help="Syllables to rewrite")
    _add_shared_args(pronounce_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def _emit(args: argparse.Namespace, payload, lines: list[str]) -> None:
    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for line in lines:
            print(line)


def _run_breakdown(args: argparse.Namespace) -> None:
    from spellphonics.analysis import get_phonics_breakdown

    breakdowns = [get_phonics_breakdown(w) for w in args.words]
    lines = []
    for b in breakdowns:
        lines.append(f"{b.word}")
        lines.append(f"  syllables: {' - '.join(b.syllables)}")
        lines.append(f"  sounds:    {' '.join(b.sounds)}")
        lines.append(f"  blends:    {', '.join(b.blends) or '(none)'}")
        lines.append(f"  pattern:   {b.pattern}")
    _emit(args, [b.to_dict() for b in breakdowns], lines)


def _run_syllables(args: argparse.Namespace) -> None:
    from spellphonics.analysis import get_syllables
    from spellphonics.speak.pronounce import rewrite_for_speech

    payload = []
    lines = []
    for word in args.words:
        syllables = get_syllables(word)
        spoken = [rewrite_for_speech(s) for s in syllables]
        payload.append({"word": word.lower(), "syllables": syllables, "spoken": spoken})
        lines.append(f"{word.lower()}: {' - '.join(syllables)}  ({' - '.join(spoken)})")
    _emit(args, payload, lines)


def _run_guide(args: argparse.Namespace) -> None:
    from spellphonics.analysis import get_pronunciation_guide

    guide = get_pronunciation_guide(args.word)
    lines = [f"{entry.letter:<4} {entry.type:<10} {entry.sound}" for entry in guide]
    _emit(args, [entry.to_dict() for entry in guide], lines)


def _run_hint(args: argparse.Namespace) -> None:
    from spellphonics.speak.hints import get_phonics_hint_for_position

    hint = get_phonics_hint_for_position(args.word, args.index)
    if hint is None:
        print(f"Error: index {args.index} is outside {args.word!r}", file=sys.stderr)
        sys.exit(1)

    lines = [
        hint.hint_text,
        f"  syllable #{hint.syllable_index}: {hint.syllable} (say {hint.pronunciation!r})",
    ]
    _emit(args, hint.to_dict(), lines)


def _run_pronounce(args: argparse.Namespace) -> None:
    from spellphonics.speak.pronounce import rewrite_for_speech

    pairs = [(s, rewrite_for_speech(s)) for s in args.syllables]
    lines = [f"{s} -> {spoken}" for s, spoken in pairs]
    _emit(args, {s: spoken for s, spoken in pairs}, lines)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s %(levelname)s: %(message)s")

    if args.command == "breakdown":
        _run_breakdown(args)
    elif args.command == "syllables":
        _run_syllables(args)
    elif args.command == "guide":
        _run_guide(args)
    elif args.command == "hint":
        _run_hint(args)
    elif args.command == "pronounce":
        _run_pronounce(args)


if __name__ == "__main__":
    main()
