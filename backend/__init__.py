"""HTTP backend for triplet counting."""
