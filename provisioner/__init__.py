"""
Widget Provisioner

Interactive setup wizard that registers an app and a marketplace widget,
wires a storage bucket to the widget and records the resulting identifiers
in a per-region config.json.
"""

__version__ = "1.0.0"
