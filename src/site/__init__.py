"""Site assembly: internal routes and the static site build."""
