"""Nexus Page Analyzer - Scanner Package.

Fetch, extract, evaluate and score a single page.
"""
