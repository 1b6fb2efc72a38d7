"""
Application package initializer.

The API is split into a small number of pieces: ``core`` holds
configuration, logging and the static dataset, ``schemas`` defines the
record types, ``services`` answers queries against the dataset and
``api`` exposes those queries over GraphQL.
"""
