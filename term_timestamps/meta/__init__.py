"""Term metadata storage.

The host owns term meta; this package only defines the interface the
recorder and query adapter need from it.
"""
