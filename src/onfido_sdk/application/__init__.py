"""Application – framework-agnostic building blocks shared by the resources."""
