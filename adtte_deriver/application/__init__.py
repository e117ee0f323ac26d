"""Application layer: use cases orchestrating the ADTTE derivation."""
