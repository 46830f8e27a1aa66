"""Small runnable programs showing gridcoord in use."""
