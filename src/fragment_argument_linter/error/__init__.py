"""Linter Errors

The :mod:`fragment_argument_linter.error` package contains the error that is raised
when a linter run fails because error-level issues have been found.
"""

from .linter_error import FragmentArgumentLinterError

__all__ = ["FragmentArgumentLinterError"]
