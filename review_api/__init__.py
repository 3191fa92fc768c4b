"""HTTP surface for the component linter."""
