"""
Entry Point Script (Bootstrap)
==============================
Runs the headless explorer demo straight from a source checkout.

It puts the 'src' directory on the Python path so that
'from minorexplorer...' resolves without installing the package.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(current_dir, 'src'))

from minorexplorer.__main__ import main

if __name__ == "__main__":
    main()
