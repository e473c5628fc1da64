from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, NoReturn, Optional, Sequence, TextIO

from scc import __version__
from scc.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from scc.core.models import ScanConfig, Standard
from scc.errors import UnknownStandardError
from scc.lexer.features import FeatureSet
from scc.logging.factory import DefaultLoggerFactory
from scc.logging.helpers import get_logger
from scc.processing.cleaner_registry import LanguageCleanerRegistry

ENCODING = 'utf-8'
ERRORS = 'surrogateescape'
STDIN_NAME = '-'

logger: LoggerLikeProtocol = get_logger('cli')


def _configure_logging(enable_json: bool, verbose: bool = False) -> None:
    """Configure the 'scc' logger for this run, either JSON or plain text."""
    global logger
    level = logging.DEBUG if verbose else logging.INFO
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=level)
    logger = factory.get_logger('cli')


def _single_char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f'expected a single character, got {value!r}')
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    p = argparse.ArgumentParser(
        prog='scc',
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            'scc – strip C and C++ comments\n'
            'Each comment is replaced by a single space; literals, numbers and\n'
            'line splices are copied unchanged. Reads stdin when no FILE is given.'
        ),
    )

    g_std = p.add_argument_group('Language')
    g_out = p.add_argument_group('Output')
    g_diag = p.add_argument_group('Diagnostics')

    g_std.add_argument(
        '-S', '--std', metavar='STD', dest='std',
        help=(
            'Language standard: C, C89, C90, C94, C99, C11, C18, C++, C++98,\n'
            'C++03, C++11, C++14, C++17. Defaults to C++ for C++ file\n'
            'suffixes (.cc, .cpp, .cxx, .hh, .hpp, .hxx) and C otherwise.'
        ),
    )
    g_std.add_argument(
        '-f', '--features', action='store_true', dest='features',
        help='Print the features of the selected standard and exit.',
    )

    g_out.add_argument(
        '-c', '--comments', action='store_true', dest='invert_output',
        help='Print the comments instead of the code.',
    )
    g_out.add_argument(
        '-e', '--empty', action='store_true', dest='mark_blank_comment',
        help="Replace each comment with an empty comment ('/* */' or '//').",
    )
    g_out.add_argument(
        '-q', '--char-placeholder', metavar='CHAR', dest='char_placeholder', type=_single_char,
        help='Replace the contents of character constants with CHAR.',
    )
    g_out.add_argument(
        '-s', '--string-placeholder', metavar='CHAR', dest='string_placeholder', type=_single_char,
        help='Replace the contents of string literals with CHAR.',
    )
    g_out.add_argument(
        '-o', '--output', metavar='FILE', dest='output',
        help='Write the result to FILE instead of stdout.',
    )

    g_diag.add_argument(
        '-n', '--nested', action='store_true', dest='warn_nested_comment',
        help="Warn about '/*' inside a C-style comment.",
    )
    g_diag.add_argument(
        '-v', '--verbose', action='store_true', dest='verbose',
        help='Enable debug logging.',
    )
    g_diag.add_argument(
        '--json-logs', action='store_true', dest='json_logs',
        help='Emit log records as JSON (also SCC_JSON_LOGS=1).',
    )

    p.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    p.add_argument('files', nargs='*', metavar='FILE', help="Source files ('-' for stdin).")
    return p


def _read_source(name: str, stdin: TextIO) -> str:
    if name == STDIN_NAME:
        buffer = getattr(stdin, 'buffer', None)
        if buffer is not None:
            return buffer.read().decode(ENCODING, ERRORS)
        return stdin.read()
    with open(name, 'r', encoding=ENCODING, errors=ERRORS, newline='') as fh:
        return fh.read()


def _write_text(stream: TextIO, text: str) -> None:
    buffer = getattr(stream, 'buffer', None)
    if buffer is not None:
        stream.flush()
        buffer.write(text.encode(ENCODING, ERRORS))
        buffer.flush()
    else:
        stream.write(text)


def describe_features(standard: Standard) -> str:
    """Render the feature listing printed by --features."""
    lines = [f'Standard: {standard.display_name}']
    lines.extend(f'Feature:  {desc}' for desc in FeatureSet.for_standard(standard).describe())
    return '\n'.join(lines) + '\n'


class Scc:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
        """Run the tool with an argv-like sequence and return the exit status."""
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('SCC_JSON_LOGS') == '1'
        _configure_logging(json_logs, ns.verbose)

        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout

        try:
            standard = Standard.parse(ns.std) if ns.std else None
        except UnknownStandardError as exc:
            logger.error('%s', exc)
            return 1

        if ns.features:
            _write_text(stdout, describe_features(standard or Standard.C))
            return 0

        registry = LanguageCleanerRegistry.default(config=ScanConfig(
            invert_output=ns.invert_output,
            mark_blank_comment=ns.mark_blank_comment,
            warn_nested_comment=ns.warn_nested_comment,
            char_placeholder=ns.char_placeholder,
            string_placeholder=ns.string_placeholder,
        ))
        forced = registry.build(standard) if standard is not None else None
        status = 0
        outputs: List[str] = []

        for name in ns.files or [STDIN_NAME]:
            label = '<stdin>' if name == STDIN_NAME else name
            try:
                source = _read_source(name, stdin)
            except OSError as exc:
                logger.error('cannot read %s: %s', label, exc)
                status = 1
                continue

            cleaner = forced or registry.cleaner_for(None if name == STDIN_NAME else name)
            result = cleaner.scan(source, filename=label)
            if not result.ok:
                logger.error('%s: %s', label, '; '.join(d.message for d in result.diagnostics))
                status = 1
                continue
            for diag in result.diagnostics:
                logger.warning('%s:%s', label, diag)
            outputs.append(result.text)

        text = ''.join(outputs)
        if ns.output:
            try:
                with open(ns.output, 'w', encoding=ENCODING, errors=ERRORS, newline='') as fh:
                    fh.write(text)
            except OSError as exc:
                logger.error('cannot write %s: %s', ns.output, exc)
                return 1
        else:
            _write_text(stdout, text)
        return status


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `scc` and `python -m scc`."""
    try:
        raise SystemExit(Scc.run(sys.argv[1:] if argv is None else argv))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)


if __name__ == '__main__':
    main()
