#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2017 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

import argparse


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number < 1:
        message = 'invalid thread count "{}"; must be >= 1'.format(value)
        raise argparse.ArgumentTypeError(message)
    return number


def subparser(subparsers):
    """Define the `genesnv replace` command-line interface."""

    desc = """\
    Apply the specified SNVs to a set of contigs and write the mutated
    sequence of each gene to a Fasta file. Gene coordinates are 1-based and
    inclusive, relative to the contig on which the gene is annotated. Records
    that cannot be processed are reported in the log and skipped.
    """

    subparser = subparsers.add_parser('replace', description=desc)
    subparser.add_argument('-o', '--out', metavar='FILE',
                           default='output.fasta', help='output file; '
                           'default is "output.fasta"; use "-" for terminal '
                           '(stdout)')
    subparser.add_argument('-t', '--threads', type=positive_int, default=None,
                           metavar='T', help='number of worker threads; '
                           'default is the number of available processors')
    subparser.add_argument('--gene-contigs', metavar='FILE', default=None,
                           help='gene/contig correspondence table; accepted '
                           'for compatibility and ignored')
    subparser.add_argument('contigs', help='contig sequences in Fasta format')
    subparser.add_argument('mutations', help='SNVs, one "contig,position,base"'
                           ' per line')
    subparser.add_argument('genes', help='gene coordinates, one '
                           '"contig,gene,start,end" per line')
