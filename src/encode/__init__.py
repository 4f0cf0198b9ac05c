"""Frame encoding layer.

This module renders typed frames into their schema+data JSON shape
for golden-file comparison and downstream consumers.
"""
