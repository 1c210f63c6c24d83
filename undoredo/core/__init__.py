# file: undoredo/core/__init__.py
