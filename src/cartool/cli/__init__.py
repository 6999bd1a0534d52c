"""cartool command line interface."""
