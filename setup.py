#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""
from setuptools import setup, find_packages

requirements =  ['numpy>=1.20.0',
                 'matplotlib>=3.5',
                 'Pillow>=9.1.0']

test_requirements = ['pytest>=4.6',
                     'pytest-cov>=2.6']

setup(
    author="pixcolor developers",
    author_email='',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    description="Pixel buffers and colormaps for turning scalar, label and optical flow rasters into images",
    package_dir={"pixcolor": "pixcolor"},
    entry_points={
        'console_scripts': ['pixcolor=pixcolor.plot:main'],
    },
    install_requires=requirements,
    extras_require={'test': test_requirements},
    license="BSD license",
    keywords='pixcolor colormap colorize optical-flow',
    name='pixcolor',
    packages=find_packages(include=['pixcolor', 'pixcolor.*']),
    python_requires='>=3.8',
    version='0.1.0',
    zip_safe=False,
)
