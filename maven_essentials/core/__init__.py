"""
Core Layer
==========

Configuration, command-line arguments, errors and logging setup.
"""
