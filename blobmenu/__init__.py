"""
Blob Menu
=========

A radial menu whose items are joined to the pointer by metaball blobs.

Every pair of circles within reach is connected by a closed outline that
leaves each circle at a blended tangent angle and pinches into a waist:

  - Overlapping circles pull their departure points inward (law of cosines)
  - Separate circles leave along the outer tangents
  - Handle length shrinks as circles close in, so the waist never overshoots
  - Zero radius, containment, coincident centres or too much distance
    mean no connector at all

The geometry lives in :mod:`blobmenu.geometry`, the item/pointer
orchestration in :mod:`blobmenu.menu`, and the PyQt5 host in
:mod:`blobmenu.canvas` / :mod:`blobmenu.main_window`.
"""

__version__ = "1.0.0"
__author__ = "Blob Menu"
