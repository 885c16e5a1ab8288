"""
vc - A short-alias git workflow accelerator.

Wraps everyday git operations (status, add, commit, push) behind one-letter
commands and manages semantic version release tags with a persisted
dry-run safety switch.
"""

__version__ = "0.1.0"
__author__ = "vc"
