"""
SDK Checker — PATH diagnostic for the .NET SDK.

Checks whether the 32-bit and 64-bit .NET SDK installs are on the executable
search path, and whether the 64-bit one is found first.
"""

__version__ = "0.1.0"
