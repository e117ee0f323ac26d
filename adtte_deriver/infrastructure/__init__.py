"""Infrastructure layer.

Adapters for reading source tables, writing the ADTTE dataset, console
logging and endpoint configuration files.
"""
