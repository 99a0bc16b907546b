"""
Reads RDF N-Triples/N-Quads sorted by subject and appends one JSON-LD (or
minimized, plain JSON) document per subject to an output file, one per line.

Sort the input first, e.g.:

    $ sort -k 1,1 UNSORTED.nt > SORTED.nt
"""
__version__ = '0.4.0'

from .blocks import subject_key, subject_blocks
from .minify import minify
from .statements import InputFormat
from .converter import Converter, OutputFormat, BlockStats, ConversionResult
