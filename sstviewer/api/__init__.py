"""HTTP surface of the viewer."""
