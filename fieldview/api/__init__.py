"""HTTP service exposing field detection and template rendering."""
