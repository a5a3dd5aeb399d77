#!/usr/bin/env python3
"""
Run the HTTP testing server.

Usage:
    python run.py [DIR] [-p PORT] [--status-code N] [--extra-delay S]
    python run.py --fixed      # fixed status code from HTTP_PORT / HTTP_CODE

    # or with venv
    .venv/Scripts/python run.py ./fixtures --status-code 404
"""
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))


def run_responder(argv):
    """Run the configurable responder (files, status override, delay)"""
    from http_testing_server.cli import main
    main(argv)


def run_fixed_code():
    """Run the environment-configured fixed status code server"""
    from http_testing_server.fixed_code import main
    main()


if __name__ == "__main__":
    if "--fixed" in sys.argv[1:]:
        run_fixed_code()
    else:
        run_responder(sys.argv[1:])
