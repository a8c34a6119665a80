"""Search, clone, scan and report pipeline."""
