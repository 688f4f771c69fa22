"""
Command-line front end for kn service export.
"""
