"""Line record storage layer.

This package maps a plain text file onto an ordered record list.
It powers the record store handle exposed by the SDK and CLI.
"""
