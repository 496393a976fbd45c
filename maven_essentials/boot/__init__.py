"""
Bootstrap Layer
===============

Starts the application: configuration discovery, container wiring,
embedded server startup and shutdown handling.

Entry: maven_essentials.boot.application.run
"""
