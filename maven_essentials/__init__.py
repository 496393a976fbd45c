"""
Maven Essentials
================

Web application bootstrap: starts the application context and embedded
server, then prints a diagnostic line.
"""

__version__ = "0.0.1"
