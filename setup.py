"""
Installation module.
To install, use `pip install .` (cwd must be the same as this file).
To uninstall, use `pip uninstall blazeclient`. The package name is the setup(name=) kwarg.
"""
# Built-in imports
from pathlib import Path
from re import MULTILINE
from re import search
from setuptools import find_packages
from setuptools import setup


root_path = Path(__file__).parent.resolve()
with open(root_path / 'requirements.txt', 'r') as req_file:
    requirements = req_file.read().splitlines()
with open(root_path / 'requirements-dev.txt', 'r') as req_file:
    dev_requirements = req_file.read().splitlines()

# Metadata is read as text, importing the package would require its dependencies
with open(root_path / 'blazeclient' / '__init__.py', 'r', encoding='utf8') as init_file:
    init_source = init_file.read()


def meta(name:str) -> str:
    return search(rf"^__{name}__ = '([^']*)'", init_source, MULTILINE).group(1)


setup(
    name='blazeclient',
    version=meta('version'),
    author=meta('author'),
    author_email=meta('email'),
    url=meta('url'),
    description=meta('description'),
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=requirements,
    extras_require={'test': dev_requirements},
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Typing :: Typed',
    ],

)
