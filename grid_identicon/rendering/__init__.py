"""Rendering subpackage.

Geometry value objects, the transform-aware :class:`Renderer` base class and a
Pillow backend. The renderer base owns coordinate transformation and winding;
backends only fill polygons and circles given in surface coordinates.

See :mod:`grid_identicon.rendering.image` for the Pillow backend and the
``render`` convenience function.
"""
