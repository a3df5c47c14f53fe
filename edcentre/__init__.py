"""
EdCentre: an interactive roster console for an education centre.

Keeps an in-memory list of Teachers, Admins and Students and lets an operator
add, list, filter, edit and delete them through a text menu.
"""

__version__ = "1.0.0"
__author__ = "EdCentre Development Team"
__description__ = "Interactive roster console for an education centre"
