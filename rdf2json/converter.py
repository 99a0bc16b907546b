from __future__ import annotations
from enum import Enum
from time import time
from typing import NamedTuple, TextIO
import sys
import threading

from .blocks import subject_blocks
from .documents import graph_documents, rename_id, dump_document
from .minify import minify
from .statements import InputFormat, normalize_block, read_statements


class OutputFormat(Enum):
    JSONLD = 'jsonld'
    JSON = 'json'


class BlockStats(NamedTuple):
    read_errors: int = 0
    statements: int = 0
    documents: int = 0


class ConversionResult(NamedTuple):
    lines: int
    read_errors: int
    statements: int
    documents: int
    stopped: bool = False


class Converter:
    """
    Appends one JSON-LD/JSON document per subject of a subject-sorted
    N-Triples/N-Quads file to an output file.
    """

    PROGRESS_INTERVAL = 2

    def __init__(self,
            input_path,
            output_path,
            input_format: InputFormat,
            output_format: OutputFormat,
            namespace: str | None = None,
            prefix: str | None = None,
            silent=False,
            progress=False,
        ):
        self.input_path = input_path
        self.output_path = output_path
        self.input_format = input_format
        self.output_format = output_format
        self.namespace = namespace
        self.prefix = prefix
        self.silent = silent
        self.progress = progress

    def convert(self, cancel: threading.Event | None = None) -> ConversionResult:
        lines = 0
        read_errors = 0
        statements = 0
        documents = 0
        stopped = False

        def count_lines(f):
            nonlocal lines
            t_last = 0.0
            for l in f:
                lines += 1
                if self.progress:
                    t_now = time()
                    if t_now - t_last > self.PROGRESS_INTERVAL:
                        t_last = t_now
                        print(f'\rAt: {lines:,}', end='', file=sys.stderr)
                yield l

        with open(self.input_path, encoding='utf-8') as infile, \
                open(self.output_path, 'a', encoding='utf-8') as outfile:
            for block in subject_blocks(count_lines(infile)):
                if cancel is not None and cancel.is_set():
                    stopped = True
                    break
                stats = self.write_graph(block, outfile)
                read_errors += stats.read_errors
                statements += stats.statements
                documents += stats.documents

        if self.progress:
            print(f'\rTotal: {lines:,}', file=sys.stderr)

        result = ConversionResult(lines, read_errors, statements, documents, stopped)
        if not self.silent and not stopped:
            print_summary(result)

        return result

    def write_graph(self, block: str, output: TextIO) -> BlockStats:
        """
        Convert a block of statements sharing one subject and write each
        resulting document to ``output`` as one line.
        """
        if not block:
            return BlockStats()

        triples, read_errors = read_statements(normalize_block(block),
                self.input_format)

        documents = 0
        for doc in graph_documents(triples):
            if self.namespace is not None:
                doc = rename_id(doc, self.namespace)
            if self.output_format is OutputFormat.JSON:
                doc = minify(doc, self.prefix)

            print(dump_document(doc), file=output)
            documents += 1

        return BlockStats(read_errors, len(triples), documents)


def print_summary(result: ConversionResult, file=None):
    file = file or sys.stdout
    print(f'Total number of lines read                   : {result.lines}', file=file)
    print(f'Statement read errors (N-Quads or N-Triples) : {result.read_errors}', file=file)
    print(f'Statements captured                          : {result.statements}', file=file)
    print(f'JSON/JSON-LD documents output                : {result.documents}', file=file)
