#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import sys
import os
from setuptools import setup
from pathlib import Path
this_dir = Path(__file__).absolute().parent

VERSION = {}
exec((this_dir / "erdlib" / "version.py").read_text(), VERSION)

if sys.argv[-1].startswith('publish'):
    if os.system("pip list | grep wheel"):
        print("wheel not installed.\nUse `pip install wheel`.\nExiting.")
        sys.exit()
    if os.system("pip list | grep twine"):
        print("twine not installed.\nUse `pip install twine`.\nExiting.")
        sys.exit()
    os.system("python setup.py sdist bdist_wheel")
    if sys.argv[-1] == 'publishtest':
        os.system("twine upload -r test dist/*")
    else:
        os.system("twine upload dist/*")
    sys.exit()

if __name__ == "__main__":
    setup(
        name="erdlib",
        version=VERSION["__version__"],
        description="Parser for a compact textual notation of "
                    "Entity-Relationship diagram elements",
        packages=["erdlib"],
        python_requires=">=3.8",
        install_requires=["click"],
        extras_require={
            "test": ["pytest", "flake8", "coverage"],
        },
        classifiers=[
            "Programming Language :: Python :: 3",
            "Topic :: Software Development :: Compilers",
            "Intended Audience :: Developers",
        ],
    )
