"""Client side of attendance synchronization.

The client keeps an optimistic local copy of the store and ships single-field
deltas to the server through a debounced, fire-and-forget transport.
"""
