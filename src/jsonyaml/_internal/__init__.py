"""Internal helpers shared by the public modules; not a stable API."""
