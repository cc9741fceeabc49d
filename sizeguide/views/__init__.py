"""PySide6 user interface of the size guide drawer."""
