"""Record store, query helpers and the per-entity services."""
