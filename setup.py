#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import sys
import os
import re
from setuptools import setup, find_packages
from pathlib import Path
this_dir = Path(__file__).absolute().parent

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

version = re.search(r'__version__ = "(.+?)"',
                    (this_dir / "lltable" / "version.py").read_text()).group(1)

if __name__ == "__main__":
    setup(
        name='lltable',
        version=version,
        description='LL(1) parsing table builder and validator',
        python_requires='>=3.8',
        packages=find_packages(include=['lltable', 'lltable.*']),
        install_requires=['click'],
        extras_require={
            'test': ['pytest'],
        },
        entry_points={
            'console_scripts': [
                'lltable = lltable.cli:lltable',
            ],
        },
    )
