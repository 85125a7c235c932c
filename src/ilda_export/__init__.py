"""ILDA Export - Decoded records to Parquet tables."""
