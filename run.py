#!/usr/bin/env python
"""Entry point for the terminal calculator."""

from regulator_calc.presentation.app import run_app

if __name__ == "__main__":
    run_app()
