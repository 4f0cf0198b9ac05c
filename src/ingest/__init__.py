"""CSV ingestion pipeline.

This module turns raw CSV text into typed, columnar frames.
It covers tokenizing, type inference, transposition and file resolution.
"""
