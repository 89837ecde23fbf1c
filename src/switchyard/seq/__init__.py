"""Folds, reductions and collection over sequences of Results and Options.

The two families share names (`fold`, `unroll`, ...), so use them through
their modules:

    from switchyard.seq import options, results

    results.unroll(parsed)
    options.reduce(lookups, max)
"""

from switchyard.seq import options, results

__all__ = ['options', 'results']
