""" Script for linting the library package. """
from subprocess import run
from os import chdir
from pathlib import Path

chdir(Path(__file__).parent.parent.resolve())

run(['pylint', 'blazeclient', '--output-format=colorized'], check=False)
