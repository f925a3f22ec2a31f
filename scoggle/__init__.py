"""
scoggle-gen — generate Sublime Text project files for sbt builds.
"""

__version__ = "0.1.0"
