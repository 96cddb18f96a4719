"""
Entry Point Script (Bootstrap)
==============================
Starting point of the application during development.

It is located outside the 'src' package and puts 'src' on the Python path so
that 'foamvis' imports resolve without installing the package.

Usage:
    $ python run.py --constraint-rotation "7 cx cy theta" --variable cx=3 --variable cy=4 --variable theta=1.2
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from foamvis.main import main

if __name__ == "__main__":
    sys.exit(main())
