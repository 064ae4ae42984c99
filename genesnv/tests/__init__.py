#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2017 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

import os.path

datadir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')


def data_file(basename):
    return datadir + '/' + basename