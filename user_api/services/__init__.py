"""Services: imperative shell orchestrating validation, persistence and envelopes.

Invariants:
    - Services depend on core/ Protocols, never on concrete repositories
"""
