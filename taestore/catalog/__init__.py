"""Catalog operation kinds, catalog errors and id allocation."""