"""Console rendering for gitread.

Modules
-------
renderer
    ``ObjectRenderer`` turns decoded objects and commit history into Rich
    renderables for terminal display.
"""
