# -*- coding: utf-8 -*-
"""The core package holds the pattern generation and resequencing engine.

It covers entities and layers, axis clustering and grid detection, numbering grids, spatial sorting,
label templates, conflict validation, and the resequencer and pattern generator built from them.
"""
