"""
sales-ingest: flexible ingestion and normalization of sales transactions.
"""

__version__ = "0.1.0"
