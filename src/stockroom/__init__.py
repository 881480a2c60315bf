"""Shop catalog, warehouse stock and order sessions."""
