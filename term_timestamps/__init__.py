"""term-timestamps: who created and modified taxonomy terms, and when.

Records creation and modification meta as terms change and exposes the
resulting history to the host's query layer.
"""

__version__ = "0.1.2"
