"""Board library data, schema and loading."""
