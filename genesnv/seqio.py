#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2016 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

from genesnv import diagnostics as diag


def parse_fasta(data):
    """Load sequences in Fasta format.

    This generator function yields a tuple containing an identifier and a
    sequence for each record in the Fasta data. The identifier is everything
    following the `>` on the header line, and sequence lines are joined as
    they appear: only line terminators are removed. Lines preceding the first
    header, and records whose header has no identifier, are ignored.
    """
    name, seq = None, []
    for line in data:
        line = line.rstrip('\r\n')
        if line.startswith('>'):
            if name:
                yield (name, ''.join(seq))
            name, seq = line[1:], []
        else:
            seq.append(line)
    if name:
        yield (name, ''.join(seq))


def load_contigs(data, diagnostics=None, source=None):
    """Load contig sequences from a Fasta file into a dictionary.

    A repeated identifier replaces the earlier sequence. Records without any
    sequence are dropped.
    """
    if diagnostics is None:
        diagnostics = diag.Diagnostics()
    contigs = dict()
    for seqid, sequence in parse_fasta(data):
        if sequence == '':
            message = 'dropping contig "{:s}" with empty sequence'.format(seqid)
            diagnostics.add(diag.EMPTY_CONTIG, message, source=source)
            continue
        if seqid in contigs:
            message = 'contig "{:s}" defined more than once'.format(seqid)
            message += ', keeping the last definition'
            diagnostics.add(diag.DUPLICATE_CONTIG, message, source=source)
        contigs[seqid] = sequence
    return contigs


def write_record(record, outstream):
    """Write a sequence record to the output stream in Fasta format."""
    print('>', record.name, '\n', record.sequence, sep='', file=outstream)
