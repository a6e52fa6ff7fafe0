""" Script for running the blazeclient test suite with coverage (unittest discovery on tests/). """
from pathlib import Path
from subprocess import CompletedProcess
from subprocess import run
from sys import argv
from sys import stdout
from webbrowser import open_new_tab


COVERAGE_ARG = '--coverage'


def main() -> CompletedProcess:
    """ Executes all tests. """
    try:
        show_coverage = bool(argv.pop(argv.index(COVERAGE_ARG)))
    except ValueError:
        show_coverage = False
    result = run(['coverage', 'run', '-m', 'unittest', 'discover', '-s', 'tests'] + argv[1:],
                 check=False)
    if show_coverage:
        run(['coverage', 'html'], check=False)
        open_new_tab(str(Path(__file__).parent.parent / 'htmlcov' / 'index.html'))
    else:
        stdout.write('\nFor the blazeclient coverage report, run "coverage report" (text) or '
                     f'pass the {COVERAGE_ARG} option to this script for the HTML version. \n')
    return result


if __name__ == '__main__':
    main()
