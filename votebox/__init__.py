"""
VoteBox - Weighted governance core for member-based organizations

Calculation core for weighted collective decision-making where each
participant carries a numeric voting weight (ownership share) rather
than one-person-one-vote:
- Proxy delegation under legal limits
- Weighted quorum with presence-gated delegated weight
- Weighted ballot tallies under majority rules
- Meeting-time consensus from yes/maybe/no preferences
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
