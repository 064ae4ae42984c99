#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2017 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

import pytest
from genesnv import WorkingCopy


@pytest.mark.parametrize('thestring', [
    ('GATTACA'),
    ('ATGNNNNNNNNNNNNNNNNNNNNNNNNNNNNNNNNTGA'),
    ('ACGTACGT'),
])
def test_basic(thestring):
    wc = WorkingCopy(thestring)
    assert str(wc) == thestring
    assert wc == thestring
    assert len(wc) == len(thestring)
    assert wc[3] == thestring[3]
    assert wc[-1] == thestring[-1]
    assert wc[2:6] == thestring[2:6]
    assert wc.modified == []


def test_substitution_copy_on_write():
    original = 'ACGTACGT'
    wc = WorkingCopy(original)
    wc[2] = 'T'
    wc[-1] = 'A'
    assert str(wc) == 'ACTTACGA'
    assert wc[1:5] == 'CTTA'
    assert wc[2] == 'T'
    assert wc[::2] == 'ATAG'
    assert original == 'ACGTACGT'
    assert wc.data is original


def test_modified():
    wc = WorkingCopy('ACGTACGT')
    wc[5] = 'G'
    wc[1] = 'C'
    wc[0] = 'T'
    assert wc.modified == [0, 5]

    # Later substitutions at the same offset replace earlier ones
    wc[5] = 'C'
    assert wc.modified == [0]
    assert str(wc) == 'TCGTACGT'


def test_bad_substitutions():
    wc = WorkingCopy('ACGT')
    with pytest.raises(IndexError):
        wc[4] = 'A'
    with pytest.raises(IndexError):
        wc[-5] = 'A'
    with pytest.raises(ValueError, match=r'single base'):
        wc[1] = 'AC'
    assert str(wc) == 'ACGT'
