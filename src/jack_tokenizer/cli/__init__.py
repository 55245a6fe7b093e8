"""
Jack Tokenizer Command-Line Interface
=====================================

- **jacktok**: tokenize a Jack source file into ``<tokens>`` XML

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["jacktok"]
