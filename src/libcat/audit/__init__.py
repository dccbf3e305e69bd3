# ABOUTME: Audit collaborators for the book store.
# ABOUTME: Exports the sink protocols and their plain-text file implementations.

from libcat.audit.error_log import ParseErrorLog
from libcat.audit.sinks import ErrorSink, TransactionSink
from libcat.audit.transaction_log import TransactionLog

__all__ = [
    "ErrorSink",
    "ParseErrorLog",
    "TransactionLog",
    "TransactionSink",
]
