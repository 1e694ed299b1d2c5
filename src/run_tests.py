#!/usr/bin/env python3
"""
Run All Tests
=============

Portable test runner for solid_math. Works from any location:
    python3 src/run_tests.py

Or from within src/, selecting files or passing pytest options:
    python3 run_tests.py tests/core/test_builders.py -x

The script automatically sets up the Python path.
"""

import os
import subprocess
import sys
from pathlib import Path


def main(argv=None):
    """Run the test suite; extra arguments go straight to pytest."""
    argv = list(sys.argv[1:] if argv is None else argv)
    src_root = Path(__file__).parent.resolve()

    env = os.environ.copy()
    pythonpath = env.get('PYTHONPATH', '')
    env['PYTHONPATH'] = f"{src_root}{os.pathsep}{pythonpath}" if pythonpath else str(src_root)

    targets = [a for a in argv if not a.startswith('-')] or ['tests/']
    options = [a for a in argv if a.startswith('-')] or ['-v', '--tb=short']

    result = subprocess.run(
        [sys.executable, '-m', 'pytest', *targets, *options],
        cwd=src_root,
        env=env,
    )
    return result.returncode


if __name__ == '__main__':
    sys.exit(main())
