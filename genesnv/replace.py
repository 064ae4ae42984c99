#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2017 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor
from itertools import repeat
import os
import sys
import screed
import genesnv
from genesnv import diagnostics as diag
from genesnv.diagnostics import Diagnostic, Diagnostics
from genesnv.genes import load_gene_coords
from genesnv.mutations import load_mutations, index_mutations
from genesnv.seqio import load_contigs, write_record
from genesnv.workingcopy import WorkingCopy


MutatedGene = namedtuple('MutatedGene', 'gene coord sequence')


def default_threads():
    return os.cpu_count() or 1


def mutate_span(sequence, coord, mutindex):
    """Apply all SNVs falling within the coordinate span to a contig copy.

    Only positions in `[coord.start, coord.end]` are looked up, so mutations
    elsewhere on the contig are never applied. The original sequence is left
    untouched.
    """
    workcopy = WorkingCopy(sequence)
    last = min(coord.end, len(sequence))
    for pos in range(coord.start, last + 1):
        newbase = mutindex.get((coord.contig, pos))
        if newbase is not None:
            workcopy[pos - 1] = newbase
    return workcopy


def mutate_gene(gene, coords, contigs, mutindex):
    """Mutate the contig copy for a single gene ID.

    Records are considered in input order. Records on unknown contigs are
    skipped. The first record that resolves determines the gene's sequence;
    any later record for the same gene ID is reported as a duplicate and
    ignored, so that the mutated copy and the coordinates used to slice it
    always come from the same record.

    Returns a tuple of the gene ID, a `MutatedGene` (or `None`), and the list
    of diagnostics raised while processing the gene.
    """
    result = None
    events = list()
    for coord in coords:
        if coord.contig not in contigs:
            message = 'gene "{:s}" references unknown contig "{:s}"'.format(
                gene, coord.contig
            )
            events.append(Diagnostic(diag.MISSING_CONTIG, message))
            continue
        if result is not None:
            message = 'gene "{:s}" already resolved at {:s}'.format(
                gene, result.coord.interval
            )
            message += ', ignoring record at {:s}'.format(coord.interval)
            events.append(Diagnostic(diag.DUPLICATE_GENE, message))
            continue
        sequence = mutate_span(contigs[coord.contig], coord, mutindex)
        result = MutatedGene(gene=gene, coord=coord, sequence=sequence)
    return gene, result, events


def mutate_genes(contigs, mutindex, geneindex, threads=None,
                 diagnostics=None):
    """Mutate every gene in the index, in parallel across gene IDs.

    Each task works only on read-only inputs and returns its own result, and
    results are folded into the output in sorted gene ID order once the pool
    hands them back.
    """
    if threads is None:
        threads = default_threads()
    if threads < 1:
        raise ValueError('thread count must be positive, got ' + str(threads))
    if diagnostics is None:
        diagnostics = Diagnostics()

    progress = genesnv.ProgressIndicator(
        '[genesnv::replace] processed {counter} genes', interval=1000,
        breaks=[10000, 100000, 1000000], usetimer=True,
    )
    genes = geneindex.genes
    coordlists = [geneindex.by_gene[gene] for gene in genes]
    mutated = dict()
    with ThreadPoolExecutor(max_workers=threads) as executor:
        tasks = executor.map(mutate_gene, genes, coordlists, repeat(contigs),
                             repeat(mutindex))
        for gene, result, events in tasks:
            diagnostics.extend(events)
            if result is not None:
                mutated[gene] = result
            progress.update()
    return mutated


def extract_gene(mutgene):
    """Slice a gene's span out of its mutated contig copy.

    Returns `None` if the span extends past the end of the contig.
    """
    coord = mutgene.coord
    if coord.end > len(mutgene.sequence):
        return None
    return mutgene.sequence[coord.start - 1:coord.end]


def extract_genes(genes, mutated, diagnostics=None):
    if diagnostics is None:
        diagnostics = Diagnostics()
    results = dict()
    for gene in sorted(genes):
        if gene not in mutated:
            message = 'no mutated sequence for gene "{:s}"'.format(gene)
            diagnostics.add(diag.NO_SEQUENCE, message)
            continue
        mutgene = mutated[gene]
        sequence = extract_gene(mutgene)
        if sequence is None:
            message = 'gene "{:s}" at {:s} extends past end of contig'.format(
                gene, mutgene.coord.interval
            )
            message += ' (length {:d})'.format(len(mutgene.sequence))
            diagnostics.add(diag.OUT_OF_RANGE, message)
            continue
        results[gene] = sequence
    return results


def gene_records(results):
    """Yield one sequence record per gene, sorted by gene ID."""
    for gene in sorted(results):
        yield screed.Record(name=gene, sequence=results[gene])


def gene_snv_replace(contigs, mutations, geneindex, threads=None,
                     diagnostics=None):
    """Apply SNVs to contigs and extract the mutated sequence of each gene.

    - contigs: dictionary of contig sequences, keyed by contig ID
    - mutations: list of `Mutation` objects
    - geneindex: a `GeneIndex` of gene coordinates
    - threads: size of the worker pool; defaults to the number of CPUs

    Returns a dictionary of gene sequences keyed by gene ID, in sorted order.
    Records that could not be processed are reported to `diagnostics`.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    mutindex = index_mutations(mutations, diagnostics)
    mutated = mutate_genes(contigs, mutindex, geneindex, threads=threads,
                           diagnostics=diagnostics)
    return extract_genes(geneindex.genes, mutated, diagnostics)


def load_input(loader, filename, diagnostics):
    instream = genesnv.open(filename, 'r')
    try:
        return loader(instream, diagnostics=diagnostics, source=filename)
    except (OSError, EOFError, UnicodeDecodeError) as err:
        message = 'cannot read file "{}": {}'.format(filename, err)
        raise genesnv.GeneSNVFileError(message) from err
    finally:
        if instream is not sys.stdin:
            instream.close()


def write_output(results, filename):
    outstream = genesnv.open(filename, 'w')
    try:
        for record in gene_records(results):
            write_record(record, outstream)
        outstream.flush()
    except OSError as err:
        message = 'cannot write file "{}": {}'.format(filename, err)
        raise genesnv.GeneSNVFileError(message) from err
    finally:
        if outstream is not sys.stdout:
            outstream.close()


def main(args):
    diagnostics = Diagnostics(prefix='[genesnv::replace]')
    if args.gene_contigs:
        message = 'WARNING: ignoring gene/contig table "{:s}"'.format(
            args.gene_contigs
        )
        message += ', contigs are taken from the gene coordinates file'
        genesnv.plog('[genesnv::replace]', message)

    genesnv.plog('[genesnv::replace] loading contigs from', args.contigs)
    contigs = load_input(load_contigs, args.contigs, diagnostics)
    genesnv.plog('[genesnv::replace]    loaded {:d} contigs'.format(
        len(contigs)
    ))

    genesnv.plog('[genesnv::replace] loading mutations from', args.mutations)
    mutations = load_input(load_mutations, args.mutations, diagnostics)
    genesnv.plog('[genesnv::replace]    loaded {:d} mutations'.format(
        len(mutations)
    ))

    genesnv.plog('[genesnv::replace] loading gene coordinates from',
                 args.genes)
    geneindex = load_input(load_gene_coords, args.genes, diagnostics)
    message = '    loaded {:d} coordinates'.format(len(geneindex))
    message += ' for {:d} genes'.format(len(geneindex.by_gene))
    message += ' on {:d} contigs'.format(len(geneindex.by_contig))
    genesnv.plog('[genesnv::replace]', message)

    threads = args.threads if args.threads is not None else default_threads()
    genesnv.plog('[genesnv::replace] mutating genes with {:d} threads'.format(
        threads
    ))
    results = gene_snv_replace(contigs, mutations, geneindex, threads=threads,
                               diagnostics=diagnostics)

    write_output(results, args.out)
    message = 'wrote {:d} gene sequences to {:s}'.format(len(results),
                                                        args.out)
    genesnv.plog('[genesnv::replace]', message)
    if len(diagnostics) > 0:
        counts = diagnostics.counts()
        summary = ', '.join(
            '{:s}={:d}'.format(kind, counts[kind]) for kind in sorted(counts)
        )
        genesnv.plog('[genesnv::replace] skipped records:', summary)
