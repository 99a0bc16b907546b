from __future__ import annotations
from enum import Enum
from pathlib import Path
import re

from rdflib import BNode, Dataset, Graph
from rdflib.exceptions import ParserError


class InputFormat(Enum):
    NTRIPLES = 'nt'
    NQUADS = 'nquads'

    @property
    def extension(self) -> str:
        return '.nq' if self is InputFormat.NQUADS else '.nt'

    @classmethod
    def from_path(cls, path) -> InputFormat | None:
        suffix = Path(path).suffix
        for fmt in cls:
            if fmt.extension == suffix:
                return fmt
        return None

    def new_graph(self) -> Graph:
        if self is InputFormat.NQUADS:
            return Dataset(default_union=True)
        return Graph()


# Stand-in scheme for IRIs without one, which rdflib refuses to parse.
RELATIVE = 'x-rdf2json-relative:'

# Either a quoted literal or an IRI closed on the same line.
TOKEN = re.compile(r'"(?:[^"\\\n]|\\.)*"|<[^<>"\n]*>')


def _repair_iri(match: re.Match) -> str:
    token = match.group()
    if not token.startswith('<'):
        return token
    iri = token[1:-1].replace(' ', '%20')
    if ':' not in iri:
        iri = RELATIVE + iri
    return f'<{iri}>'


def normalize_block(text: str) -> str:
    """
    Repair escaping defects found in some triple store dumps (e.g. Virtuoso):
    ``\\'`` in literals and raw spaces in IRIs. IRIs without a scheme get the
    ``RELATIVE`` one, to be removed again from the resulting documents.
    """
    text = text.replace("\\'", "'")
    return TOKEN.sub(_repair_iri, text)


class LabelledBNodes(dict):
    """Blank node context keeping the labels used in the input."""

    def __missing__(self, label):
        bnode = self[label] = BNode(label)
        return bnode

    def __contains__(self, label):
        return True

    def get(self, label, default=None):
        return self[label]


def read_statements(block: str, input_format: InputFormat):
    """
    Parse a block line by line. Returns the parsed triples (graph labels are
    dropped) and the number of lines that failed to parse.
    """
    triples = []
    read_errors = 0
    bnode_context = LabelledBNodes()

    for line in block.split('\n'):
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue

        graph = input_format.new_graph()
        try:
            graph.parse(data=line, format=input_format.value,
                    bnode_context=bnode_context)
        except ParserError:
            read_errors += 1
            continue

        triples.extend(graph.triples((None, None, None)))

    return triples, read_errors
