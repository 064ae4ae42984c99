#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2018 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

import time
import genesnv


class ProgressIndicator(object):
    """Progress indicator that logs messages with decreasing frequency.

    Report often while only a few genes have been processed, then back off
    each time the counter reaches one of the `breaks`, so that runs over
    hundreds of thousands of genes do not flood the log.
    """
    def __init__(self, message, interval=10, breaks=(100, 1000, 10000),
                 usetimer=False):
        self.message = message
        self.counter = 0
        self.interval = interval
        self.nextupdate = interval
        self.breaks = set(breaks)
        self.started = time.monotonic() if usetimer else None

    def elapsed(self):
        if self.started is None:
            return None
        return time.monotonic() - self.started

    def update(self):
        self.counter += 1
        if self.counter in self.breaks:
            self.interval = self.counter
        if self.counter < self.nextupdate:
            return
        self.nextupdate += self.interval
        message = self.message.format(counter=self.counter)
        if self.started is not None:
            message += ' ({:.2f} seconds elapsed)'.format(self.elapsed())
        genesnv.plog(message)
