#!/usr/bin/env python
# License: BSD 3 clause
from setuptools import find_packages, setup

# Get version without importing, which avoids dependency issues
exec(compile(open('arffparse/version.py').read(), 'arffparse/version.py', 'exec'))


def readme():
    with open('README.rst') as f:
        return f.read()


def requirements():
    req_path = 'requirements.txt'
    with open(req_path) as f:
        reqs = f.read().splitlines()
    return reqs


setup(name='arffparse',
      version=__version__,  # noqa: F821
      description=('Read ARFF files into datasets of typed attributes and '
                   'numeric rows.'),
      long_description=readme(),
      keywords='arff weka dataset parser',
      license='BSD 3 clause',
      packages=find_packages(exclude=['tests', 'tests.*']),
      install_requires=requirements(),
      extras_require={'test': ['pytest']},
      python_requires='>=3.8',
      classifiers=['Intended Audience :: Science/Research',
                   'Intended Audience :: Developers',
                   'License :: OSI Approved :: BSD License',
                   'Programming Language :: Python',
                   'Topic :: Software Development',
                   'Topic :: Scientific/Engineering',
                   'Operating System :: Microsoft :: Windows',
                   'Operating System :: POSIX',
                   'Operating System :: Unix',
                   'Operating System :: MacOS',
                   'Programming Language :: Python :: 3',
                   ],
      zip_safe=False)
