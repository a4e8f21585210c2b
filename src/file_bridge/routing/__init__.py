"""Routing — ordered route list with exact path and method matching.

Routes are registered during setup and frozen when the app compiles.
"""
