"""
Entry Point Script (Bootstrap)
==============================
Runs the rotating demo mesh straight from a source checkout.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It puts 'src' on 'sys.path' so 'from meshgraph.model ...' resolves
   without installing the package first.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from meshgraph.main import main

if __name__ == "__main__":
    main()
