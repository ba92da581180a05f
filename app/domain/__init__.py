"""Domain-level rules for rentals.

Pricing and lateness rules live here, together with the store-access
contracts the rental lifecycle service depends on. Nothing in this package
knows about HTTP or SQL.
"""
