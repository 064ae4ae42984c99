#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2017 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

from io import StringIO
import pytest
import genesnv
from genesnv.diagnostics import Diagnostics
from genesnv.mutations import Mutation, load_mutations, index_mutations
from genesnv.mutations import parse_mutation, parse_position
from genesnv.tests import data_file


def test_load_mutations():
    instream = genesnv.open(data_file('muts.csv'), 'r')
    diagnostics = Diagnostics(echo=False)
    mutations = load_mutations(instream, diagnostics, source='muts.csv')
    assert mutations == [
        Mutation(contig='contig1', pos=1, base='G'),
        Mutation(contig='contig1', pos=5, base='T'),
        Mutation(contig='contig1', pos=12, base='C'),
        Mutation(contig='contig2', pos=8, base='A'),
        Mutation(contig='contig2', pos=9, base='T'),
    ]

    assert len(diagnostics) == 5
    assert diagnostics.counts() == {'malformed-mutation': 5}
    linenos = [d.lineno for d in diagnostics]
    assert linenos == [6, 7, 8, 9, 10]
    assert all(d.source == 'muts.csv' for d in diagnostics)


@pytest.mark.parametrize('line,mutation', [
    ('c1,3,T', Mutation('c1', 3, 'T')),
    ('c1,3,TTT', Mutation('c1', 3, 'T')),
    ('c1,0003,g', Mutation('c1', 3, 'g')),
    ('c1 with space,12,N', Mutation('c1 with space', 12, 'N')),
    ('c1,0,T', None),
    ('c1,-3,T', None),
    ('c1,+3,T', None),
    ('c1, 3,T', None),
    ('c1,3.0,T', None),
    ('c1,3,', None),
    ('c1,3', None),
    ('c1,3,T,extra', None),
])
def test_parse_mutation(line, mutation):
    assert parse_mutation(line) == mutation


def test_parse_position():
    assert parse_position('42') == 42
    assert parse_position('0') is None
    assert parse_position('') is None
    assert parse_position('4e2') is None


def test_load_mutations_blank_lines():
    instream = StringIO('\nc1,1,A\r\n\n   \nc1,2,C\n')
    diagnostics = Diagnostics(echo=False)
    mutations = load_mutations(instream, diagnostics)
    assert mutations == [Mutation('c1', 1, 'A'), Mutation('c1', 2, 'C')]
    assert len(diagnostics) == 0


def test_malformed_mutation_logged(capsys):
    load_mutations(StringIO('c1,one,A\n'), source='bogus.csv')
    out, err = capsys.readouterr()
    assert 'WARNING: bogus.csv:1: skipping malformed mutation' in err
    assert '(malformed-mutation)' in err


def test_index_mutations_last_wins():
    mutations = [
        Mutation('c1', 3, 'T'),
        Mutation('c1', 4, 'A'),
        Mutation('c2', 3, 'G'),
        Mutation('c1', 3, 'C'),
        Mutation('c1', 4, 'A'),
    ]
    diagnostics = Diagnostics(echo=False)
    index = index_mutations(mutations, diagnostics)
    assert index == {('c1', 3): 'C', ('c1', 4): 'A', ('c2', 3): 'G'}

    # Identical duplicates are not a conflict
    conflicts = diagnostics.of_kind('conflicting-mutation')
    assert len(conflicts) == 1
    assert 'c1:3 (T replaced by C)' in conflicts[0].message
