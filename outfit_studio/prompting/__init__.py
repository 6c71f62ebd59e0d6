"""Prompting package.

This package contains deterministic prompt-construction helpers used by the
text-generation client. It does not perform model invocation or reply parsing.
"""
