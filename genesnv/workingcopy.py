#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2017 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------


class WorkingCopy(object):
    """
    Copy-on-write view of a contig sequence

    Substitutions are kept in a position-to-base table on top of the
    original string, which is never modified. Reading a slice materializes
    only that slice, so mutating a short gene on a long contig does not
    require copying the whole contig.
    """

    def __init__(self, data):
        self.data = data
        self.edits = dict()

    def __str__(self):
        return self[:]

    def __repr__(self):
        return 'WorkingCopy({!r}, edits={:d})'.format(self.data,
                                                       len(self.edits))

    def __eq__(self, other):
        return str(self) == str(other)

    def __len__(self):
        return len(self.data)

    def __setitem__(self, index, value):
        if len(value) != 1:
            raise ValueError('can only substitute a single base')
        if index < 0:
            index += len(self.data)
        if not 0 <= index < len(self.data):
            raise IndexError('working copy index out of range')
        self.edits[index] = value

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self.data))
            positions = range(start, stop, step)
            chars = list(self.data[index])
            for pos, base in self.edits.items():
                if pos in positions:
                    chars[positions.index(pos)] = base
            return ''.join(chars)
        if index < 0:
            index += len(self.data)
        if index in self.edits:
            return self.edits[index]
        return self.data[index]

    @property
    def modified(self):
        """Sorted 0-based offsets at which the copy differs from the original.
        """
        return sorted(p for p, b in self.edits.items() if self.data[p] != b)
