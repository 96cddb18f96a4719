"""Interactive front-end for foam-bubble visualization."""
