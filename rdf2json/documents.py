import json

from rdflib import Graph
from rdflib.plugins.serializers.jsonld import from_rdf

from .statements import RELATIVE


ID = '@id'
VALUE = '@value'


def graph_documents(triples) -> list:
    graph = Graph()
    for triple in triples:
        graph.add(triple)

    # Objects that are never subjects come out as bare {"@id": ...} nodes.
    return [plain(node) for node in from_rdf(graph) if list(node) != [ID]]


def plain(data, key=None):
    """
    Copy a node into plain JSON data: rdflib terms become ``str`` and IRIs
    lose the ``RELATIVE`` scheme given to them when parsing.
    """
    if isinstance(data, dict):
        return {iri_text(k): plain(v, k) for k, v in data.items()}
    elif isinstance(data, list):
        return [plain(item, key) for item in data]
    elif isinstance(data, str):
        return str(data) if key == VALUE else iri_text(data)
    return data


def iri_text(iri) -> str:
    iri = str(iri)
    if iri.startswith(RELATIVE):
        return iri[len(RELATIVE):]
    return iri


def rename_id(doc: dict, namespace: str) -> dict:
    if ID in doc:
        doc[namespace] = doc.pop(ID)
    return doc


def dump_document(doc: dict) -> str:
    return json.dumps(doc, ensure_ascii=False, separators=(',', ':'))
