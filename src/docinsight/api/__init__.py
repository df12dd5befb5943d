"""HTTP surface for DocInsight."""
