"""Rendering subpackage.

Turns an identicon's color and pixel map into an image:

* A square RGB canvas painted with the background color.
* One solid rectangle per filled cell; adjacent cells abut exactly.
* Deterministic PNG encoding (no timestamps or text chunks).

See :mod:`identicon.renderer.raster` for the drawing and encoding routines.
"""
