"""Static tables: display names and study-cycle catalogs."""
