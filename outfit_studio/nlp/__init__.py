"""Reply-parsing package.

Holds the loose label extraction applied to text-generation replies.
"""
