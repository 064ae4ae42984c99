#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2017 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

from collections import defaultdict, namedtuple
import csv
from genesnv import diagnostics as diag
from genesnv.mutations import parse_position


class GeneCoordinate(namedtuple('GeneCoordinate', 'contig gene start end')):
    """Closed, 1-based interval of a gene on a contig."""
    __slots__ = ()

    @property
    def span(self):
        return self.end - self.start + 1

    @property
    def interval(self):
        return '{:s}:{:d}-{:d}'.format(self.contig, self.start, self.end)

    def __str__(self):
        return '{:s}@{:s}'.format(self.gene, self.interval)


class GeneIndex(object):
    """Gene coordinates grouped by contig and by gene ID.

    Both groupings keep records in input order.
    """

    def __init__(self, coords=None):
        self.coords = list()
        self.by_contig = defaultdict(list)
        self.by_gene = defaultdict(list)
        if coords:
            for coord in coords:
                self.add(coord)

    def __len__(self):
        return len(self.coords)

    def __iter__(self):
        return iter(self.coords)

    def __contains__(self, gene):
        return gene in self.by_gene

    def add(self, coord):
        self.coords.append(coord)
        self.by_contig[coord.contig].append(coord)
        self.by_gene[coord.gene].append(coord)

    @property
    def genes(self):
        return sorted(self.by_gene)

    def duplicates(self):
        """Gene IDs associated with more than one coordinate record."""
        return sorted(g for g, c in self.by_gene.items() if len(c) > 1)


def split_row(line):
    """Split a single line into CSV fields; `None` if it cannot be parsed.

    Quoting is honored within the line only, so an unbalanced quote cannot
    carry over into the rows that follow.
    """
    try:
        return next(csv.reader([line]), [])
    except csv.Error:
        return None


def parse_coordinate(fields):
    if fields is None or len(fields) != 4:
        return None
    contig, gene, start, end = [field.strip() for field in fields]
    start, end = parse_position(start), parse_position(end)
    if start is None or end is None or start > end:
        return None
    return GeneCoordinate(contig=contig, gene=gene, start=start, end=end)


def load_gene_coords(instream, diagnostics=None, source=None):
    """Load gene coordinates from a headerless CSV file.

    Each row is `contig_id,gene_id,start,end` with 1-based inclusive
    coordinates; whitespace around fields is ignored. Coordinates are not
    checked against contig lengths here.
    """
    if diagnostics is None:
        diagnostics = diag.Diagnostics()
    index = GeneIndex()
    for lineno, line in enumerate(instream, 1):
        line = line.rstrip('\r\n')
        if line.strip() == '':
            continue
        coord = parse_coordinate(split_row(line))
        if coord is None:
            message = 'skipping malformed gene coordinate row '
            message += '"{:s}"'.format(line)
            diagnostics.add(diag.MALFORMED_COORDINATE, message, source=source,
                            lineno=lineno)
            continue
        index.add(coord)
    return index
