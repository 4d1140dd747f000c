"""Page layer of the console.

Views, dialog flows and services are plain Python objects with no dependency
on a display server, so a tkinter or web front-end can bind to them and the
test suite can drive them headless.
"""
