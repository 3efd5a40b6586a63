"""
Batch ingestion: readers, writers and the processing pipeline.
"""
