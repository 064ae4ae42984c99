#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2016 The Regents of the University of California
#
# This file is part of genesnv (http://github.com/dib-lab/genesnv) and is
# licensed under the MIT license: see LICENSE.
# -----------------------------------------------------------------------------

from setuptools import setup
import re


with open('genesnv/__init__.py', 'r') as infile:
    version = re.search(r"^__version__ = '([^']+)'", infile.read(),
                        re.MULTILINE).group(1)

dependencies = [
    'screed>=1.0',
]

setup(name='genesnv',
      version=version,
      description=('Apply single-nucleotide variants to assembled contigs '
                   'and extract mutated gene sequences'),
      url='https://github.com/dib-lab/genesnv',
      author='Daniel Standage',
      author_email='daniel.standage@gmail.com',
      license='MIT',
      packages=['genesnv', 'genesnv.cli', 'genesnv.tests'],
      package_data={
          'genesnv': ['tests/data/*']
      },
      include_package_data=True,
      install_requires=dependencies,
      extras_require={
          'test': ['pytest>=3.0'],
      },
      python_requires='>=3.5',
      entry_points={
          'console_scripts': ['genesnv = genesnv.__main__:main']
      },
      classifiers=[
          'Development Status :: 4 - Beta',
          'Environment :: Console',
          'License :: OSI Approved :: MIT License',
          'Programming Language :: Python :: 3',
          'Topic :: Scientific/Engineering :: Bio-Informatics'
      ],
      zip_safe=False)
