"""Domain layer for the ADTTE deriver.

This layer contains the time-to-event derivation logic and its entities.
It is independent of file formats, consoles and command-line handling.
"""
