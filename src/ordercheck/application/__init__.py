"""Application layer: rules, engine, reporters."""
