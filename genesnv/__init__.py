#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2016 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

# Core libraries
import builtins
from gzip import open as gzopen
import sys

__version__ = '0.3.0'

logstream = None


class GeneSNVFileError(OSError):
    """Raised if an input file cannot be read or the output cannot be written.
    """
    pass


def plog(*args, **kwargs):
    """Print a log message to the designated log stream.

    Messages go to `genesnv.logstream` if one has been set, and to the
    current `sys.stderr` otherwise.
    """
    outstream = logstream if logstream is not None else sys.stderr
    print(*args, **kwargs, file=outstream)


def open(filename, mode):
    if mode not in ('r', 'w'):
        raise ValueError('invalid mode "{}"'.format(mode))
    if filename in ['-', None]:
        filehandle = sys.stdin if mode == 'r' else sys.stdout
        return filehandle
    openfunc = builtins.open
    if filename.endswith('.gz'):
        openfunc = gzopen
        mode += 't'
    try:
        return openfunc(filename, mode)
    except OSError as err:
        action = 'read' if mode.startswith('r') else 'write'
        message = 'cannot {:s} file "{:s}": {}'.format(action, filename, err)
        raise GeneSNVFileError(message) from err


# Internal modules
from genesnv import diagnostics
from genesnv.diagnostics import Diagnostic, Diagnostics
from genesnv import seqio
from genesnv.seqio import parse_fasta, load_contigs, write_record
from genesnv.workingcopy import WorkingCopy
from genesnv.progress import ProgressIndicator
from genesnv import mutations
from genesnv.mutations import Mutation
from genesnv import genes
from genesnv.genes import GeneCoordinate, GeneIndex

# Subcommands and command-line interface
from genesnv import replace
from genesnv import cli
