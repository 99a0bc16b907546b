from __future__ import annotations
from pathlib import Path
import argparse
import signal
import sys
import threading

from . import __version__
from .converter import Converter, OutputFormat
from .statements import InputFormat


EXIT_OK = 0
EXIT_BAD_ARGUMENTS = 1
EXIT_MISSING_REQUIRED = 2
EXIT_CONFLICTING_FORMATS = 3
EXIT_UNKNOWN_FORMAT = 4
EXIT_MISSING_INPUT = 6

DESCRIPTION = """
Reads RDF N-Triples/N-Quads that are sorted by subject and appends a
JSON/JSON-LD document per line in a designated output file.
"""

EPILOG = """
Sorting on Mac OS X & Linux:
  sort -k 1,1 UNSORTED.EXT > SORTED.EXT

The --minimize option drops "@type", replaces {"@value": ...} and
{"@id": ...} objects by their bare values, and shortens keys starting with
--prefix.
"""


class ArgumentParser(argparse.ArgumentParser):

    def error(self, message):
        fail(self, f'Error: {message}', EXIT_BAD_ARGUMENTS)


def fail(argp: argparse.ArgumentParser, message: str, code: int):
    print(message, file=sys.stderr)
    print(file=sys.stderr)
    argp.print_help(sys.stderr)
    sys.exit(code)


def build_parser() -> argparse.ArgumentParser:
    argp = ArgumentParser(prog='rdf2json',
            usage='%(prog)s [options] --input filename.nt --output filename.json',
            description=DESCRIPTION,
            epilog=EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter)

    required = argp.add_argument_group('required')
    required.add_argument('-i', '--input', metavar='FILE',
            help='Input file for the conversion; either RDF N-Triples or N-Quads.')
    required.add_argument('-o', '--output', metavar='FILE',
            help='Output file to which JSON-LD/JSON is appended.')

    options = argp.add_argument_group('options')
    options.add_argument('-m', '--minimize', action='store_true', default=False,
            help='Minimize JSON-LD to plain (semantically untyped) JSON.')
    options.add_argument('-n', '--namespace', nargs='?', const=None,
            default=argparse.SUPPRESS,
            help='Alternative name for JSON-LD\'s "@id" key; replaces it; turns on --minimize.')
    options.add_argument('-p', '--prefix', nargs='?', const=None,
            help='Prefix that should be removed from keys; requires --minimize.')
    options.add_argument('-t', '--triples', action='store_true', default=False,
            help='Input file is in RDF N-Triples format.')
    options.add_argument('-q', '--quads', action='store_true', default=False,
            help='Input file is in RDF N-Quads format.')
    options.add_argument('-s', '--silent', action='store_true', default=False,
            help='Do not output summary statistics.')
    options.add_argument('-P', '--progress', action='store_true', default=False,
            help='Report the number of lines read on stderr while converting.')
    options.add_argument('-v', '--version', action='version',
            version=f'%(prog)s {__version__}')

    return argp


def resolve_input_format(argp, args) -> InputFormat:
    if args.triples and args.quads:
        fail(argp, 'Error: both --triples and --quads parameters were used.\n'
                '       Only one of the parameters may be provided for explicitly\n'
                '       setting the input fileformat.',
                EXIT_CONFLICTING_FORMATS)

    if args.triples:
        return InputFormat.NTRIPLES
    if args.quads:
        return InputFormat.NQUADS

    input_format = InputFormat.from_path(args.input)
    if input_format is None:
        fail(argp, 'Error: Cannot determine input file format by filename extension.\n'
                '       Recognized fileformat extensions are .nt and .nq for N-Triples\n'
                '       and N-Quads respectively. Use --triples or --quads options to\n'
                '       explicitly set the input fileformat (ignores filename extension\n'
                '       when one of those options is given).',
                EXIT_UNKNOWN_FORMAT)

    return input_format


def main(argv=None) -> int:
    try:
        return run(argv)
    except SystemExit as e:
        return e.code


def run(argv=None) -> int:
    argp = build_parser()
    args = argp.parse_args(argv)

    if not args.input or not args.output:
        fail(argp, 'Error: Requires --input and --output parameters.',
                EXIT_MISSING_REQUIRED)

    input_format = resolve_input_format(argp, args)

    minimize = args.minimize or 'namespace' in args
    output_format = OutputFormat.JSON if minimize else OutputFormat.JSONLD

    if not Path(args.input).exists():
        fail(argp, 'Error: Input file (--input parameter) does not seem to exist.',
                EXIT_MISSING_INPUT)

    converter = Converter(args.input, args.output, input_format, output_format,
            namespace=getattr(args, 'namespace', None),
            prefix=args.prefix,
            silent=args.silent,
            progress=args.progress)

    cancel = threading.Event()
    previous = signal.signal(signal.SIGINT, lambda signum, frame: cancel.set())
    try:
        result = converter.convert(cancel)
    finally:
        signal.signal(signal.SIGINT, previous)

    if result.stopped and not args.silent:
        print('Interrupted; stopped after', f'{result.lines:,}', 'lines.',
                file=sys.stderr)

    return EXIT_OK
