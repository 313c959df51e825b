"""tip5lab: the Tip5 permutation over the Goldilocks field, with analysis tooling.

Research / education only. Do NOT use in production.
"""

from .permutation import permute, round_function, hash_10, hash_pair, P, STATE_SIZE

__version__ = "0.1.0"
