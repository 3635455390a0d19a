"""qhilbert: commands subpackage
---------------------------------------------------------
Implementation of the ``qhilbert`` CLI commands, organized with Typer.

Public API
----------
``space`` : Print the index table of a composite space (``qhilbert space 2 3``)
``config`` : Configuration commands (``qhilbert config show/set``)
"""
