"""
Backend GiveRep — Sui payment helpers for the GiveRep reputation dApp.

Builds the coin inputs that reward and payment transactions spend: finds
the owner's coins of a given type, consolidates them and splits off the
exact amount requested. Does not sign or broadcast transactions.
"""

__version__ = "0.1.0"
