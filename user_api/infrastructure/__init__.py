"""Infrastructure: database engine, persistence gateway, logging setup.

Invariants:
    - The only layer that touches SQLAlchemy sessions directly
"""
