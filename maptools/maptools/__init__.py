"""Helper functions over mappings and pandas adapters built on them."""
