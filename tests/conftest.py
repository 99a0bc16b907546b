import json

import pytest


NTRIPLES = """\
<http://example.org/s1> <http://test/p1> <http://example.org/o1> .
<http://example.org/s1> <http://example.org/p2> "l1" .
<http://example.org/s1> <http://example.org/p3> <http://example.org/o3> .
<http://example.org/s1> <http://example.org/p3> <http://example.org/o4> .
<http://example.org/s2> <http://test/p1> <http://example.org/o5> .
<http://example.org/s2> <http://example.org/p4> "l2" .
"""

NQUADS = """\
<http://example.org/s1> <http://test/p1> <http://example.org/o1> <http://example.org/g1> .
<http://example.org/s1> <http://example.org/p2> "l1" <http://example.org/g1> .
<http://example.org/s1> <http://example.org/p3> <http://example.org/o3> <http://example.org/g1> .
<http://example.org/s1> <http://example.org/p3> <http://example.org/o4> <http://example.org/g1> .
<http://example.org/s2> <http://test/p1> <http://example.org/o5> <http://example.org/g2> .
<http://example.org/s2> <http://example.org/p4> "l2" <http://example.org/g2> .
"""


def read_documents(path):
    with open(path, encoding='utf-8') as f:
        return [json.loads(l) for l in f]


def sort_values(doc):
    return {k: sorted(v) if isinstance(v, list) and all(isinstance(x, str) for x in v) else v
            for k, v in doc.items()}


@pytest.fixture
def ntriples_file(tmp_path):
    path = tmp_path / 'input.nt'
    path.write_text(NTRIPLES, encoding='utf-8')
    return path


@pytest.fixture
def nquads_file(tmp_path):
    path = tmp_path / 'input.nq'
    path.write_text(NQUADS, encoding='utf-8')
    return path


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / 'output.json'
