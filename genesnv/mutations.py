#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2017 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

from collections import namedtuple
import re
from genesnv import diagnostics as diag


Mutation = namedtuple('Mutation', 'contig pos base')
positive_int = re.compile(r'[0-9]+')


def parse_position(field):
    """Parse a 1-based coordinate; return `None` if it is not positive."""
    if not positive_int.fullmatch(field):
        return None
    value = int(field)
    return value if value > 0 else None


def parse_mutation(line):
    fields = line.split(',')
    if len(fields) != 3:
        return None
    contig, position, base = fields
    pos = parse_position(position)
    if pos is None or base == '':
        return None
    return Mutation(contig=contig, pos=pos, base=base[0])


def load_mutations(instream, diagnostics=None, source=None):
    """Load SNVs from a headerless `contig,position,base` file.

    Fields are taken as is, without trimming. Only the first character of the
    base field is used. Rows that cannot be parsed are reported and skipped.
    """
    if diagnostics is None:
        diagnostics = diag.Diagnostics()
    mutations = list()
    for lineno, line in enumerate(instream, 1):
        line = line.rstrip('\r\n')
        if line.strip() == '':
            continue
        mutation = parse_mutation(line)
        if mutation is None:
            message = 'skipping malformed mutation "{:s}"'.format(line)
            diagnostics.add(diag.MALFORMED_MUTATION, message, source=source,
                            lineno=lineno)
            continue
        mutations.append(mutation)
    return mutations


def index_mutations(mutations, diagnostics=None):
    """Build a `(contig, position) -> base` lookup table.

    When several mutations target the same position the one listed last wins.
    """
    if diagnostics is None:
        diagnostics = diag.Diagnostics()
    index = dict()
    for mut in mutations:
        key = (mut.contig, mut.pos)
        previous = index.get(key)
        if previous is not None and previous != mut.base:
            message = 'conflicting mutations at {:s}:{:d}'.format(*key)
            message += ' ({:s} replaced by {:s})'.format(previous, mut.base)
            diagnostics.add(diag.CONFLICTING_MUTATION, message)
        index[key] = mut.base
    return index
