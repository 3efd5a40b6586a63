"""
Core domain: models, normalizers, schema reconciliation and pipeline stages.
"""
