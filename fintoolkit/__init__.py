"""
fintoolkit — numeric core of a personal-finance calculator suite.

Pure, stateless solvers (tax brackets, annuities, growth series, IRR,
structured-note barriers) plus an injected key-value store for remembering
the last inputs a user typed into each calculator.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
