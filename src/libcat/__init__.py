# ABOUTME: libcat - a flat-file library circulation catalog.
# ABOUTME: Tracks books, their availability, and borrow/return transactions.
