"""
Command-line interface for the New Ithkuil analysis engine.

- Parsing words and showing their gloss and canonical spelling
- Glossing words with long, markdown or show-defaults output
- Tokenizing words
- Glossing a whole file of words in batch
"""
import sys
import argparse
import json
import logging

from tqdm import tqdm

from ithkuil.errors import ParseError
from ithkuil.gloss import GlossFlags
from ithkuil.logging_config import ProgressLogger, level_from_env, setup_logging
from ithkuil.stream import ParseFlags, TokenList

logger = logging.getLogger(__name__)


def _gloss_flags(args) -> GlossFlags:
    flags = GlossFlags.NONE
    if getattr(args, 'long', False):
        flags |= GlossFlags.LONG
    if getattr(args, 'show_defaults', False):
        flags |= GlossFlags.SHOW_DEFAULTS
    if getattr(args, 'markdown', False):
        flags |= GlossFlags.FORMAT_MARKDOWN
    return flags


def _parse_flags(args) -> ParseFlags:
    return ParseFlags.PERMISSIVE if getattr(args, 'permissive', False) else ParseFlags.NONE


def _read_words(args):
    if args.words:
        return args.words
    if getattr(args, 'file', None):
        with open(args.file, 'r', encoding='utf-8') as f:
            return f.read().split()
    print("Enter New Ithkuil text:")
    return input().split()


def analyze(word, gloss_flags=GlossFlags.NONE, parse_flags=ParseFlags.NONE):
    """
    Parse one word into a JSON-ready dict.

    Failures are reported in the dict under "error" rather than raised.
    """
    from ithkuil.word import parse_word, word_kind

    try:
        value = parse_word(word, parse_flags)
    except ParseError as e:
        logger.debug(f"Failed to parse '{word}': {e.kind.name}")
        return {'word': word, 'error': str(e), 'error_kind': e.kind.name}

    result = {
        'word': word,
        'kind': word_kind(value),
        'gloss': value.gloss(gloss_flags),
    }
    try:
        result['canonical'] = value.to_string()
    except ValueError as e:
        logger.warning(f"Cannot re-spell '{word}': {e}")
    return result


def cmd_parse(args):
    """Parse words and show their kind, gloss and canonical spelling."""
    words = _read_words(args)
    results = [analyze(word, _gloss_flags(args), _parse_flags(args)) for word in words]

    if args.format == 'json':
        print(json.dumps(results, indent=2, ensure_ascii=False))
    else:
        for result in results:
            if 'error' in result:
                print(f"{result['word']}: ERROR: {result['error']}")
                continue
            print(f"{result['word']} ({result['kind']})")
            print(f"  Gloss: {result['gloss']}")
            if 'canonical' in result:
                print(f"  Canonical: {result['canonical']}")

    if any('error' in result for result in results):
        sys.exit(1)


def cmd_gloss(args):
    """Print one gloss per word."""
    from ithkuil.word import gloss_word

    try:
        glosses = [gloss_word(word, _gloss_flags(args), _parse_flags(args)) for word in _read_words(args)]
    except ParseError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == 'json':
        print(json.dumps(glosses, indent=2, ensure_ascii=False))
    else:
        print(" ".join(glosses))


def cmd_tokenize(args):
    """Show the tokens of each word."""
    output = []
    try:
        for word in _read_words(args):
            token_list = TokenList.from_str(word)
            output.append({
                'word': word,
                'stress': token_list.stress.abbr if token_list.stress else None,
                'tokens': [
                    {'kind': type(token).__name__, 'text': str(token)}
                    for token in token_list.tokens
                ],
            })
    except ParseError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == 'json':
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        for entry in output:
            tokens = " ".join(f"{t['kind']}({t['text']})" for t in entry['tokens'])
            print(f"{entry['word']} [{entry['stress'] or 'PEN'}]: {tokens}")


def cmd_batch(args):
    """Gloss every word in a file, writing one JSON object per line."""
    try:
        with open(args.file, 'r', encoding='utf-8') as f:
            words = f.read().split()
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    gloss_flags = _gloss_flags(args)
    parse_flags = _parse_flags(args)
    out = open(args.output, 'w', encoding='utf-8') if args.output else sys.stdout

    failures = 0
    progress = ProgressLogger(len(words), desc="Glossing words", logger=logger) if args.no_progress else None
    try:
        for word in (words if progress else tqdm(words, desc="Glossing words")):
            result = analyze(word, gloss_flags, parse_flags)
            if 'error' in result:
                failures += 1
            out.write(json.dumps(result, ensure_ascii=False) + "\n")
            if progress:
                progress.update()
    finally:
        if out is not sys.stdout:
            out.close()

    logger.info(f"Glossed {len(words) - failures}/{len(words)} words ({failures} failures)")
    if failures and args.strict:
        sys.exit(1)


def _add_gloss_options(parser):
    parser.add_argument('--long', action='store_true', help='Use long category names')
    parser.add_argument('--show-defaults', action='store_true', help='Show default categories')
    parser.add_argument('--markdown', action='store_true', help='Bold roots and affixes')
    parser.add_argument('--permissive', action='store_true',
                        help='Relax slot V affix count and concatenation stress checks')


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='ithkuil',
        description='Parse and gloss romanized New Ithkuil words',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse and gloss words
  ithkuil parse hliosulţe lawe
  ithkuil parse --file words.txt --format json

  # Gloss only
  ithkuil gloss --long eru

  # Tokenize
  ithkuil tokenize "ţ_řa"

  # Batch
  ithkuil batch words.txt --output glosses.jsonl
        """
    )
    parser.add_argument('--log-file', default=None, help='Also write logs to this file')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Log level (overridden by ITHKUIL_LOG_LEVEL)')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # --- parse command ---
    parser_parse = subparsers.add_parser('parse', help='Parse words')
    parser_parse.add_argument('words', nargs='*', help='Words to parse')
    parser_parse.add_argument('-f', '--file', help='Read words from file')
    parser_parse.add_argument('--format', choices=['text', 'json'], default='text',
                              help='Output format (default: text)')
    _add_gloss_options(parser_parse)
    parser_parse.set_defaults(func=cmd_parse)

    # --- gloss command ---
    parser_gloss = subparsers.add_parser('gloss', help='Gloss words')
    parser_gloss.add_argument('words', nargs='*', help='Words to gloss')
    parser_gloss.add_argument('-f', '--file', help='Read words from file')
    parser_gloss.add_argument('--format', choices=['text', 'json'], default='text',
                              help='Output format (default: text)')
    _add_gloss_options(parser_gloss)
    parser_gloss.set_defaults(func=cmd_gloss)

    # --- tokenize command ---
    parser_tokenize = subparsers.add_parser('tokenize', help='Show the tokens of words')
    parser_tokenize.add_argument('words', nargs='*', help='Words to tokenize')
    parser_tokenize.add_argument('-f', '--file', help='Read words from file')
    parser_tokenize.add_argument('--format', choices=['text', 'json'], default='text',
                                 help='Output format (default: text)')
    parser_tokenize.set_defaults(func=cmd_tokenize)

    # --- batch command ---
    parser_batch = subparsers.add_parser('batch', help='Gloss a file of words as JSON lines')
    parser_batch.add_argument('file', help='File of whitespace-separated words')
    parser_batch.add_argument('-o', '--output', help='Output file (default: stdout)')
    parser_batch.add_argument('--no-progress', action='store_true', help='Log progress instead of showing a progress bar')
    parser_batch.add_argument('--strict', action='store_true',
                              help='Exit with status 1 if any word fails')
    _add_gloss_options(parser_batch)
    parser_batch.set_defaults(func=cmd_batch)

    args = parser.parse_args(argv)

    try:
        level = level_from_env(getattr(logging, args.log_level))
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    setup_logging(log_file=args.log_file, level=level, debug=args.debug)

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == '__main__':
    main()
