# -*- coding: utf-8 -*-
"""Plots of entity layers and their visiting order."""
