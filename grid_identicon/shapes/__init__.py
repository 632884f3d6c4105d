"""Shape categories, shape function tables and per-hash shape resolution.

Import from the submodules directly, e.g.::

    from grid_identicon.shapes.category import DEFAULT_CATEGORIES
    from grid_identicon.shapes.shape import build_shapes
"""
