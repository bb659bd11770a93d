"""Catalogue of concrete diagnostic variants.

Importing this package registers every lint and validation variant, which
:func:`dsf_linter.model.restore` needs to rebuild items from a JSON report.
"""

from dsf_linter.items import lint, validation
from dsf_linter.items.common import FloatingElementType

__all__ = ["lint", "validation", "FloatingElementType"]
