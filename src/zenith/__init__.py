"""Zenith — booking backend.

Accounts with email/password login and bearer tokens, per-user tasks,
and a travel catalog (buses, hotels, trains) served over REST.
"""

__version__ = "0.1.0"
