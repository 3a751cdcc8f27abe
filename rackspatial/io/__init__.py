# -*- coding: utf-8 -*-
"""The io package contains modules for reading and writing entity layers as vector data.

It lets layouts exported from the designer be loaded as entity layers and previews be saved for review.
"""
