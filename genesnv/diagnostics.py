#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2016 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

from collections import Counter, namedtuple
import genesnv


EMPTY_CONTIG = 'empty-contig'
DUPLICATE_CONTIG = 'duplicate-contig'
MALFORMED_MUTATION = 'malformed-mutation'
CONFLICTING_MUTATION = 'conflicting-mutation'
MALFORMED_COORDINATE = 'malformed-coordinate'
MISSING_CONTIG = 'missing-contig'
DUPLICATE_GENE = 'duplicate-gene'
OUT_OF_RANGE = 'out-of-range'
NO_SEQUENCE = 'no-sequence'

kinds = (
    EMPTY_CONTIG, DUPLICATE_CONTIG, MALFORMED_MUTATION, CONFLICTING_MUTATION,
    MALFORMED_COORDINATE, MISSING_CONTIG, DUPLICATE_GENE, OUT_OF_RANGE,
    NO_SEQUENCE,
)


Diagnostic = namedtuple('Diagnostic', 'kind message source lineno')
Diagnostic.__new__.__defaults__ = (None, None)


class Diagnostics(object):
    """Collection of skipped-record events.

    Every loader and processing stage reports the records it could not handle
    here instead of raising, so that a run never aborts for a single bad
    record. Events are echoed to the log as they are recorded unless the
    collector is created with `echo=False`, and remain available afterwards
    for inspection (`counts()`, `of_kind()`).
    """

    def __init__(self, prefix='[genesnv]', echo=True):
        self.prefix = prefix
        self.echo = echo
        self.events = list()

    def __len__(self):
        return len(self.events)

    def __iter__(self):
        return iter(self.events)

    def add(self, kind, message, source=None, lineno=None):
        if kind not in kinds:
            raise ValueError('unknown diagnostic kind "{}"'.format(kind))
        event = Diagnostic(kind, message, source=source, lineno=lineno)
        self.record(event)
        return event

    def record(self, event):
        self.events.append(event)
        if self.echo:
            genesnv.plog(self.prefix, 'WARNING:', format_event(event))

    def extend(self, events):
        for event in events:
            self.record(event)

    def of_kind(self, kind):
        return [e for e in self.events if e.kind == kind]

    def counts(self):
        return Counter(e.kind for e in self.events)


def format_event(event):
    location = ''
    if event.source is not None:
        location = event.source
        if event.lineno is not None:
            location += ':{:d}'.format(event.lineno)
        location += ': '
    return '{:s}{:s} ({:s})'.format(location, event.message, event.kind)
