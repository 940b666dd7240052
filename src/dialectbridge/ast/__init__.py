"""Engine expression tree consumed by the dialect layer."""
