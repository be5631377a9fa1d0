"""Quota-limited buffer management: nodes, pinning and eviction."""