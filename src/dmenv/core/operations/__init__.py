"""Building blocks for Project operations, one module per concern."""
