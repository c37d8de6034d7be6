"""
Trade data ingestion module.

Handles classification of trade codes, parsing of dataset lines into
immutable trade records, data sources and dataset loading.
"""
