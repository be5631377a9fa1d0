"""Shared primitives: reference counts, identifiers, lists, ranges, file names and memory pools."""