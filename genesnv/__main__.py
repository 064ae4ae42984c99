#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2017 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

import sys
import genesnv


def main(arglist=None):
    """Entry point for the genesnv CLI.

    Isolated as a method so that the CLI can be called by other Python code
    (e.g. for testing), in which case the arguments are passed to the function.
    If no arguments are passed to the function, parse them from the command
    line. Returns the exit status: 0 if the run completed, 1 if an input could
    not be read or the output could not be written.
    """
    args = genesnv.cli.parse_args(arglist)
    if args.cmd is None:  # pragma: no cover
        genesnv.cli.parser().parse_args(['-h'])

    assert args.cmd in genesnv.cli.mains
    mainmethod = genesnv.cli.mains[args.cmd]
    genesnv.logstream, logstream = args.logfile, genesnv.logstream
    versionmessage = '[genesnv] running version {}'.format(genesnv.__version__)
    genesnv.plog(versionmessage)
    try:
        mainmethod(args)
    except genesnv.GeneSNVFileError as err:
        genesnv.plog('[genesnv] ERROR:', err)
        return 1
    finally:
        args.logfile.flush()
        genesnv.logstream = logstream
    return 0


if __name__ == '__main__':
    sys.exit(main())
