#!/usr/bin/env python

import os
from setuptools import setup

# load __version__
version_file = 'sketching/version.py'
# use eval to convert string
__version__ = eval(open(version_file).read().split('=')[-1])

# load README.md as long_description
long_description = ''
if os.path.exists('README.md'):
    with open('README.md', 'r') as f:
        long_description = f.read()

# call the magical setuptools setup
setup(name='sketching',
      version=__version__,
      description='Trace hand drawn looking contours around 2D shapes',
      long_description=long_description,
      long_description_content_type='text/markdown',
      license='MIT',
      keywords='drawing generative art geometry 2D',
      classifiers=[
          'Development Status :: 3 - Alpha',
          'License :: OSI Approved :: MIT License',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          'Natural Language :: English',
          'Topic :: Artistic Software',
          'Topic :: Scientific/Engineering'],
      packages=['sketching'],
      install_requires=['numpy',
                        'shapely>=2.0',
                        'trimesh'],
      extras_require={'easy': ['matplotlib'],
                      'test': ['pytest']})
