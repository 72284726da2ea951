"""Clinical coordination records app.

This package holds the record models, the per-entity services built on
the durable record store and the HTTP views that expose them.
"""
