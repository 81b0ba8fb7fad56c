"""Layout core: resolver, registry, reorder engine, drag, persistence."""
